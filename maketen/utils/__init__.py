"""Utility functions package."""
from .helpers import (
    board_from_json,
    class_shares,
    extract_digit_statistics,
    format_board_for_display,
    validate_board_json,
)

__all__ = [
    "board_from_json",
    "class_shares",
    "extract_digit_statistics",
    "format_board_for_display",
    "validate_board_json",
]
