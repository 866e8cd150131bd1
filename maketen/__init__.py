"""Make-ten board generation and layout engine."""
from .config import Settings, get_settings
from .core import (
    apply_selection,
    compute_layout,
    count_clearable_rectangles,
    evaluate_selection,
    find_clearable_rectangle,
    generate_board,
    is_board_cleared,
    is_solvable,
    is_stuck,
    mint_challenge_seed,
    reshuffle_board,
    resolve_difficulty,
)
from .models import (
    Board,
    CandidateRectangle,
    DisplayBounds,
    GenerationResult,
    GenerationStatus,
    Layout,
    Selection,
)

__version__ = "1.0.0"

__all__ = [
    "Settings",
    "get_settings",
    "apply_selection",
    "compute_layout",
    "count_clearable_rectangles",
    "evaluate_selection",
    "find_clearable_rectangle",
    "generate_board",
    "is_board_cleared",
    "is_solvable",
    "is_stuck",
    "mint_challenge_seed",
    "reshuffle_board",
    "resolve_difficulty",
    "Board",
    "CandidateRectangle",
    "DisplayBounds",
    "GenerationResult",
    "GenerationStatus",
    "Layout",
    "Selection",
]
