"""Core business logic package.

This package contains the engines for difficulty resolution, layout fitting,
number placement, solvability checking and board generation.
"""
from .difficulty import DifficultyResolver, resolve_difficulty
from .generator import BoardGenerator, generate_board, get_generator
from .grid import iter_grid_candidates, solve_grid_dimensions
from .layout import LayoutEngine, compute_layout, fit_tile_size, get_layout_engine
from .placement import NumberPlacer, place_numbers, get_placer
from .rules import (
    apply_selection,
    evaluate_selection,
    is_board_cleared,
    is_stuck,
    reshuffle_board,
)
from .seed import SeedState, mint_challenge_seed
from .solvability import (
    count_clearable_rectangles,
    find_clearable_rectangle,
    is_solvable,
    rectangle_sum,
)

__all__ = [
    "DifficultyResolver",
    "resolve_difficulty",
    "BoardGenerator",
    "generate_board",
    "get_generator",
    "iter_grid_candidates",
    "solve_grid_dimensions",
    "LayoutEngine",
    "compute_layout",
    "fit_tile_size",
    "get_layout_engine",
    "NumberPlacer",
    "place_numbers",
    "get_placer",
    "apply_selection",
    "evaluate_selection",
    "is_board_cleared",
    "is_stuck",
    "reshuffle_board",
    "SeedState",
    "mint_challenge_seed",
    "count_clearable_rectangles",
    "find_clearable_rectangle",
    "is_solvable",
    "rectangle_sum",
]
