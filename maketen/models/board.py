"""Board and selection data structures."""
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple


class MakeTenError(Exception):
    """Base error for caller misuse of the engine."""


class InvalidBoardError(MakeTenError):
    """Raised when a Board is built from inconsistent data."""


@dataclass(frozen=True)
class Board:
    """
    Immutable generated puzzle.

    Tiles are stored row-major; 0 marks an empty cell. Clearing cells never
    mutates a board, it produces a new one via with_cleared().

    Attributes:
        width: Number of columns.
        height: Number of rows.
        tiles: Row-major cell values in [0, 9].
        seed: Seed label the board was generated from.
        is_challenge: True for challenge-mode boards.
    """
    width: int
    height: int
    tiles: Tuple[int, ...]
    seed: str = ""
    is_challenge: bool = False

    def __post_init__(self):
        """Normalize tiles to a tuple and check the shape."""
        tiles = tuple(int(v) for v in self.tiles)
        object.__setattr__(self, "tiles", tiles)

        if self.width <= 0 or self.height <= 0:
            raise InvalidBoardError(
                f"Board dimensions must be positive, got {self.width}x{self.height}"
            )
        if len(tiles) != self.width * self.height:
            raise InvalidBoardError(
                f"Expected {self.width * self.height} tiles, got {len(tiles)}"
            )
        bad = [v for v in tiles if v < 0 or v > 9]
        if bad:
            raise InvalidBoardError(f"Tile values must be in 0-9, got {bad[0]}")

    @classmethod
    def from_grid(
        cls,
        grid: Sequence[Sequence[Optional[int]]],
        seed: str = "",
        is_challenge: bool = False,
    ) -> "Board":
        """
        Create a Board from a 2D grid.

        None cells are treated as empty.

        Args:
            grid: Rows of cell values.
            seed: Optional seed label.
            is_challenge: Challenge-mode flag.

        Returns:
            Board instance.
        """
        height = len(grid)
        width = len(grid[0]) if height > 0 else 0
        tiles = [v or 0 for row in grid for v in row]
        return cls(width=width, height=height, tiles=tuple(tiles),
                   seed=seed, is_challenge=is_challenge)

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self.height

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self.width

    def index(self, row: int, col: int) -> int:
        """Row-major index of a cell."""
        return row * self.width + col

    def cell(self, row: int, col: int) -> int:
        """Value at a cell, 0 outside the grid."""
        if 0 <= row < self.height and 0 <= col < self.width:
            return self.tiles[row * self.width + col]
        return 0

    @property
    def total(self) -> int:
        """Sum of all non-zero values."""
        return sum(self.tiles)

    @property
    def non_zero_count(self) -> int:
        """Number of cells still holding a value."""
        return sum(1 for v in self.tiles if v > 0)

    @property
    def is_cleared(self) -> bool:
        """True when no non-zero tiles remain."""
        return all(v == 0 for v in self.tiles)

    def with_cleared(self, cells: Iterable[Tuple[int, int]]) -> "Board":
        """
        Return a new board with the given cells set to 0.

        Args:
            cells: (row, col) positions to clear.

        Returns:
            New Board; this board is unchanged.
        """
        tiles = list(self.tiles)
        for row, col in cells:
            tiles[self.index(row, col)] = 0
        return Board(width=self.width, height=self.height, tiles=tuple(tiles),
                     seed=self.seed, is_challenge=self.is_challenge)

    def with_tiles(self, tiles: Sequence[int]) -> "Board":
        """Return a new board with the same shape and different tiles."""
        return Board(width=self.width, height=self.height, tiles=tuple(tiles),
                     seed=self.seed, is_challenge=self.is_challenge)

    def to_grid(self) -> List[List[int]]:
        """Convert to a mutable 2D list."""
        return [
            list(self.tiles[r * self.width:(r + 1) * self.width])
            for r in range(self.height)
        ]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "seed": self.seed,
            "width": self.width,
            "height": self.height,
            "tiles": list(self.tiles),
            "is_challenge": self.is_challenge,
        }


@dataclass(frozen=True)
class Selection:
    """
    A rectangle selection evaluated against a board.

    The rectangle is the inclusive bounding box between two corner cells;
    empty cells inside it contribute nothing.

    Attributes:
        r1: Top row index (inclusive)
        c1: Left column index (inclusive)
        r2: Bottom row index (inclusive)
        c2: Right column index (inclusive)
        cells: Non-empty (row, col) cells inside the rectangle
        total: Sum of the non-empty cells
    """
    r1: int
    c1: int
    r2: int
    c2: int
    cells: Tuple[Tuple[int, int], ...] = field(default_factory=tuple)
    total: int = 0

    @property
    def is_clearable(self) -> bool:
        """True when the selection sums to exactly ten."""
        return self.total == 10 and len(self.cells) > 0

    @property
    def cell_count(self) -> int:
        """Number of cells the selection would clear."""
        return len(self.cells)

    @property
    def area(self) -> int:
        """Area of the rectangle, empty cells included."""
        return (self.r2 - self.r1 + 1) * (self.c2 - self.c1 + 1)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "start_row": self.r1,
            "start_col": self.c1,
            "end_row": self.r2,
            "end_col": self.c2,
            "cells": [list(c) for c in self.cells],
            "total": self.total,
        }
