"""Data models package.

This package contains the board, layout and level data types, the level
progression tables and the pydantic boundary schemas.
"""
from .board import Board, Selection, MakeTenError, InvalidBoardError
from .layout import FitStrategy, Layout, TilePosition
from .level import (
    DifficultyProfile,
    GenerationIssue,
    GenerationResult,
    GenerationStatus,
    IssueRecord,
)
from .leveling_config import (
    LevelPhase,
    calculate_tile_count,
    get_bracket_config,
    get_phase_for_level,
)
from .schemas import CandidateRectangle, DisplayBounds, GenerateRequest

__all__ = [
    "Board",
    "Selection",
    "MakeTenError",
    "InvalidBoardError",
    "FitStrategy",
    "Layout",
    "TilePosition",
    "DifficultyProfile",
    "GenerationIssue",
    "GenerationResult",
    "GenerationStatus",
    "IssueRecord",
    "LevelPhase",
    "calculate_tile_count",
    "get_bracket_config",
    "get_phase_for_level",
    "CandidateRectangle",
    "DisplayBounds",
    "GenerateRequest",
]
