"""Tile size fitter and layout engine."""
import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from ..config import Settings, get_settings
from ..models.layout import FitStrategy, Layout
from ..models.leveling_config import calculate_tile_count
from ..models.schemas import DisplayBounds
from .grid import fallback_grid_dimensions, iter_grid_candidates, solve_grid_dimensions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TileFit:
    """Sizes derived from one tile size for a (rows, cols) shape."""
    rows: int
    cols: int
    tile_size: int
    tiles_rect_width: int
    tiles_rect_height: int
    content_width: int
    content_height: int
    board_width: int
    board_height: int
    is_valid: bool


def measure(
    rows: int,
    cols: int,
    tile_size: int,
    gap: int,
    padding: int,
    frame_width: int,
    min_tile_size: int,
) -> TileFit:
    """Build the nested rectangle sizes for a fixed tile size."""
    tiles_rect_width = cols * tile_size + (cols - 1) * gap
    tiles_rect_height = rows * tile_size + (rows - 1) * gap
    content_width = tiles_rect_width + 2 * padding
    content_height = tiles_rect_height + 2 * padding
    return TileFit(
        rows=rows,
        cols=cols,
        tile_size=tile_size,
        tiles_rect_width=tiles_rect_width,
        tiles_rect_height=tiles_rect_height,
        content_width=content_width,
        content_height=content_height,
        board_width=content_width + 2 * frame_width,
        board_height=content_height + 2 * frame_width,
        is_valid=tile_size >= min_tile_size,
    )


def fit_tile_size(
    rows: int,
    cols: int,
    width: float,
    height: float,
    min_tile_size: int,
    gap: int,
    padding: int,
    frame_width: int,
) -> TileFit:
    """
    Largest tile size that fits a (rows, cols) grid into width x height.

    Frame and padding are removed from both sides of each axis, then the
    remaining space is split between tiles and the gaps between them.

    Args:
        rows: Grid rows.
        cols: Grid columns.
        width: Available width.
        height: Available height.
        min_tile_size: Smallest acceptable tile.
        gap: Gap between tiles.
        padding: Padding between tiles and frame.
        frame_width: Frame thickness.

    Returns:
        TileFit; is_valid is False when the size is below the minimum.
    """
    available_width = width - 2 * frame_width - 2 * padding
    available_height = height - 2 * frame_width - 2 * padding

    tile_w = (available_width - (cols - 1) * gap) / cols
    tile_h = (available_height - (rows - 1) * gap) / rows
    tile_size = max(0, int(math.floor(min(tile_w, tile_h))))

    return measure(rows, cols, tile_size, gap, padding, frame_width, min_tile_size)


class LayoutEngine:
    """Computes board layouts with a three-tier fallback."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def fit(self, rows: int, cols: int, bounds: DisplayBounds) -> TileFit:
        """Fit a shape into the bounds with the configured geometry."""
        s = self.settings
        return fit_tile_size(
            rows, cols, bounds.width, bounds.height,
            min_tile_size=s.min_tile_size,
            gap=s.tile_gap,
            padding=s.board_padding,
            frame_width=s.frame_width,
        )

    def compute(
        self,
        tile_count: int,
        bounds: DisplayBounds,
        level: Optional[int] = None,
    ) -> Layout:
        """
        Compute the layout for a tile count.

        Args:
            tile_count: Number of tiles to hold.
            bounds: Display area reserved for the board.
            level: Optional level; early levels reuse the reference
                level's tile size.

        Returns:
            Layout, centred in the bounds.
        """
        n = max(1, tile_count)
        rows, cols = solve_grid_dimensions(n, bounds.aspect_ratio)

        if level is not None and level <= self.settings.reference_level:
            locked = self._reference_fit(rows, cols, bounds)
            if locked is not None:
                return self._build(locked, bounds, FitStrategy.IDEAL)

        # Strategy A: aspect-optimal shape at its largest tile size
        fit = self.fit(rows, cols, bounds)
        if fit.is_valid:
            return self._build(fit, bounds, FitStrategy.IDEAL)

        # Strategy B: any other shape that meets the minimum, largest tile wins
        best: Optional[TileFit] = None
        for r, c in iter_grid_candidates(n):
            if (r, c) == (rows, cols):
                continue
            candidate = self.fit(r, c, bounds)
            if candidate.is_valid and (best is None or candidate.tile_size > best.tile_size):
                best = candidate
        if best is not None:
            logger.debug(
                f"Reshaped grid {rows}x{cols} -> {best.rows}x{best.cols} "
                f"(tile {best.tile_size})"
            )
            return self._build(best, bounds, FitStrategy.RESHAPED)

        # Strategy C: force the minimum tile size and flag the layout
        s = self.settings
        frows, fcols = fallback_grid_dimensions(n)
        forced = measure(
            frows, fcols, s.min_tile_size, s.tile_gap, s.board_padding,
            s.frame_width, s.min_tile_size,
        )
        logger.warning(
            f"Layout infeasible for {n} tiles in {bounds.width}x{bounds.height}; "
            f"forcing {frows}x{fcols} at tile size {s.min_tile_size}"
        )
        return self._build(forced, bounds, FitStrategy.FORCED)

    def _reference_fit(
        self, rows: int, cols: int, bounds: DisplayBounds
    ) -> Optional[TileFit]:
        """Tile size of the reference level applied to this shape, if it fits."""
        s = self.settings
        ref_count = calculate_tile_count(s.reference_level, ceiling=s.max_tile_count)
        ref_rows, ref_cols = solve_grid_dimensions(ref_count, bounds.aspect_ratio)
        ref_fit = self.fit(ref_rows, ref_cols, bounds)
        if not ref_fit.is_valid:
            return None

        locked = measure(
            rows, cols, ref_fit.tile_size, s.tile_gap, s.board_padding,
            s.frame_width, s.min_tile_size,
        )
        if locked.board_width <= bounds.width and locked.board_height <= bounds.height:
            return locked
        return None

    def _build(self, fit: TileFit, bounds: DisplayBounds, strategy: FitStrategy) -> Layout:
        left, top = centre_in(bounds, fit.board_width, fit.board_height)
        return Layout(
            rows=fit.rows,
            cols=fit.cols,
            tile_size=fit.tile_size,
            gap=self.settings.tile_gap,
            padding=self.settings.board_padding,
            frame_width=self.settings.frame_width,
            tiles_rect_width=fit.tiles_rect_width,
            tiles_rect_height=fit.tiles_rect_height,
            content_width=fit.content_width,
            content_height=fit.content_height,
            board_width=fit.board_width,
            board_height=fit.board_height,
            board_left=left,
            board_top=top,
            strategy=strategy,
            is_valid=strategy != FitStrategy.FORCED,
            overflows=fit.board_width > bounds.width or fit.board_height > bounds.height,
        )


def centre_in(bounds: DisplayBounds, width: float, height: float) -> Tuple[float, float]:
    """Top-left corner that centres a width x height box in the bounds."""
    return (
        bounds.left + (bounds.width - width) / 2,
        bounds.top + (bounds.height - height) / 2,
    )


_engine: Optional[LayoutEngine] = None


def get_layout_engine() -> LayoutEngine:
    """Get or create layout engine singleton instance."""
    global _engine
    if _engine is None:
        _engine = LayoutEngine()
    return _engine


def compute_layout(
    tile_count: int,
    bounds: DisplayBounds,
    level: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> Layout:
    """
    Dimension solving, tile size fitting and centring in one call.

    Args:
        tile_count: Number of tiles.
        bounds: Display area reserved for the board.
        level: Optional level number.
        settings: Optional settings override.

    Returns:
        Layout for the board.
    """
    engine = LayoutEngine(settings) if settings is not None else get_layout_engine()
    return engine.compute(tile_count, bounds, level)
