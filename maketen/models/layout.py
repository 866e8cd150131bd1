"""Layout data structures."""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class FitStrategy(str, Enum):
    """Which fitter tier produced a layout."""
    IDEAL = "ideal"          # primary computation met the minimum
    RESHAPED = "reshaped"    # another (rows, cols) shape met the minimum
    FORCED = "forced"        # minimum size forced, may overflow


@dataclass(frozen=True)
class TilePosition:
    """Top-left corner and size of one tile."""
    x: float
    y: float
    width: int
    height: int


@dataclass(frozen=True)
class Layout:
    """
    Geometry of a board inside its display area.

    Nesting, from the outside in: board (frame included) -> content area
    (padding included) -> tile rectangle. Each level is centred in its
    parent.
    """
    rows: int
    cols: int
    tile_size: int
    gap: int
    padding: int
    frame_width: int
    tiles_rect_width: int
    tiles_rect_height: int
    content_width: int
    content_height: int
    board_width: int
    board_height: int
    board_left: float
    board_top: float
    strategy: FitStrategy = FitStrategy.IDEAL
    is_valid: bool = True
    overflows: bool = False

    def get_tile_position(self, row: int, col: int) -> Optional[TilePosition]:
        """
        Position of a tile relative to the board's outer top-left corner.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            TilePosition, or None outside [0, rows) x [0, cols).
        """
        if row < 0 or row >= self.rows or col < 0 or col >= self.cols:
            return None

        rect_x = (self.content_width - self.tiles_rect_width) / 2
        rect_y = (self.content_height - self.tiles_rect_height) / 2
        step = self.tile_size + self.gap

        return TilePosition(
            x=self.frame_width + rect_x + col * step,
            y=self.frame_width + rect_y + row * step,
            width=self.tile_size,
            height=self.tile_size,
        )

    def get_absolute_tile_position(self, row: int, col: int) -> Optional[TilePosition]:
        """Position of a tile in screen coordinates."""
        pos = self.get_tile_position(row, col)
        if pos is None:
            return None
        return TilePosition(
            x=self.board_left + pos.x,
            y=self.board_top + pos.y,
            width=pos.width,
            height=pos.height,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "rows": self.rows,
            "cols": self.cols,
            "tile_size": self.tile_size,
            "gap": self.gap,
            "padding": self.padding,
            "frame_width": self.frame_width,
            "tiles_rect_width": self.tiles_rect_width,
            "tiles_rect_height": self.tiles_rect_height,
            "content_width": self.content_width,
            "content_height": self.content_height,
            "board_width": self.board_width,
            "board_height": self.board_height,
            "board_left": self.board_left,
            "board_top": self.board_top,
            "strategy": self.strategy.value,
            "is_valid": self.is_valid,
            "overflows": self.overflows,
        }
