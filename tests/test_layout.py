"""Tests for the tile size fitter and layout engine."""
import pytest

from maketen.config import Settings
from maketen.core.layout import LayoutEngine, compute_layout, fit_tile_size
from maketen.models.layout import FitStrategy
from maketen.models.schemas import DisplayBounds


class TestFitTileSize:
    """Test cases for fit_tile_size."""

    def test_primary_computation(self):
        """Test the tile size for the level 35 grid on the default screen."""
        fit = fit_tile_size(13, 8, 390, 624, min_tile_size=28, gap=4, padding=5, frame_width=8)
        assert fit.tile_size == 42
        assert fit.is_valid
        assert fit.tiles_rect_width == 8 * 42 + 7 * 4
        assert fit.content_width == fit.tiles_rect_width + 10
        assert fit.board_width == fit.content_width + 16

    def test_below_minimum_is_invalid(self):
        fit = fit_tile_size(18, 7, 200, 80, min_tile_size=28, gap=4, padding=5, frame_width=8)
        assert not fit.is_valid


class TestComputeLayout:
    """Test cases for compute_layout."""

    def test_level_one_layout(self, default_bounds, settings):
        """Test the layout of level 1 on the default screen."""
        layout = compute_layout(9, default_bounds, level=1, settings=settings)

        assert (layout.rows, layout.cols) == (4, 3)
        assert layout.tile_size == 42
        assert layout.strategy == FitStrategy.IDEAL
        assert layout.board_width == 160
        assert layout.board_height == 206
        assert layout.board_left == 115
        assert layout.board_top == 120 + (624 - 206) / 2
        assert layout.is_valid
        assert not layout.overflows

    def test_early_levels_share_reference_tile_size(self, default_bounds, settings):
        """Test that early levels reuse the reference level's tile size."""
        reference = compute_layout(92, default_bounds, level=35, settings=settings)
        early = compute_layout(9, default_bounds, level=1, settings=settings)
        unlocked = compute_layout(9, default_bounds, settings=settings)

        assert early.tile_size == reference.tile_size
        assert unlocked.tile_size > early.tile_size

    def test_full_board_fits(self, default_bounds, settings):
        """Test 120 tiles on a standard phone screen (strategy A)."""
        layout = compute_layout(120, default_bounds, level=60, settings=settings)

        assert (layout.rows, layout.cols) == (14, 9)
        assert layout.tile_size == 36
        assert layout.tile_size >= settings.min_tile_size
        assert layout.strategy == FitStrategy.IDEAL
        assert layout.board_width <= default_bounds.width
        assert layout.board_height <= default_bounds.height

    def test_reshaped_grid(self):
        """Test that strategy B picks the shape with the largest valid tile."""
        settings = Settings(min_tile_size=8, tile_gap=0, board_padding=0, frame_width=45)
        bounds = DisplayBounds(width=200, height=100)
        layout = compute_layout(8, bounds, settings=settings)

        assert layout.strategy == FitStrategy.RESHAPED
        assert (layout.rows, layout.cols) == (1, 8)
        assert layout.tile_size == 10
        assert layout.is_valid
        assert not layout.overflows

    def test_forced_layout_never_raises(self, settings):
        """Test 120 tiles on a tiny display (strategy C)."""
        bounds = DisplayBounds(width=200, height=80)
        layout = compute_layout(120, bounds, settings=settings)

        assert layout.strategy == FitStrategy.FORCED
        assert (layout.rows, layout.cols) == (11, 11)
        assert layout.tile_size == settings.min_tile_size
        assert not layout.is_valid
        assert layout.overflows

    def test_forced_layout_logs_warning(self, settings, caplog):
        bounds = DisplayBounds(width=200, height=80)
        with caplog.at_level("WARNING", logger="maketen.core.layout"):
            LayoutEngine(settings).compute(120, bounds)
        assert "infeasible" in caplog.text

    @pytest.mark.parametrize("count", [9, 27, 53, 92, 120])
    def test_board_is_centred(self, count, default_bounds, settings):
        """Test that the board is centred in the display area."""
        layout = compute_layout(count, default_bounds, settings=settings)
        centre_x = layout.board_left + layout.board_width / 2
        centre_y = layout.board_top + layout.board_height / 2
        assert centre_x == pytest.approx(default_bounds.left + default_bounds.width / 2)
        assert centre_y == pytest.approx(default_bounds.top + default_bounds.height / 2)


class TestTilePositions:
    """Test cases for tile positions."""

    def test_first_tiles(self, default_bounds, settings):
        """Test positions of the first tiles of level 1."""
        layout = compute_layout(9, default_bounds, level=1, settings=settings)

        first = layout.get_tile_position(0, 0)
        assert (first.x, first.y) == (13, 13)
        assert first.width == first.height == 42

        second = layout.get_tile_position(0, 1)
        assert second.x == 13 + 42 + 4

        absolute = layout.get_absolute_tile_position(0, 0)
        assert absolute.x == layout.board_left + 13
        assert absolute.y == layout.board_top + 13

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (4, 0), (0, 3)])
    def test_out_of_range(self, row, col, default_bounds, settings):
        layout = compute_layout(9, default_bounds, level=1, settings=settings)
        assert layout.get_tile_position(row, col) is None
        assert layout.get_absolute_tile_position(row, col) is None

    def test_tiles_do_not_overlap(self, default_bounds, settings):
        """Test that every tile rectangle is disjoint and inside the board."""
        layout = compute_layout(53, default_bounds, settings=settings)
        rects = []
        for row in range(layout.rows):
            for col in range(layout.cols):
                pos = layout.get_tile_position(row, col)
                assert pos.x >= layout.frame_width
                assert pos.y >= layout.frame_width
                assert pos.x + pos.width <= layout.board_width - layout.frame_width
                assert pos.y + pos.height <= layout.board_height - layout.frame_width
                rects.append(pos)

        for i, a in enumerate(rects):
            for b in rects[i + 1:]:
                overlap_x = a.x < b.x + b.width and b.x < a.x + a.width
                overlap_y = a.y < b.y + b.height and b.y < a.y + a.height
                assert not (overlap_x and overlap_y)
