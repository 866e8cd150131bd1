"""Utility helper functions."""
from typing import Dict, Any, List, Optional, Tuple

from ..models.board import Board
from ..core.placement import count_large_adjacencies, digit_class


def validate_board_json(board_json: Dict[str, Any]) -> Tuple[bool, Optional[str]]:
    """
    Validate board JSON structure.

    Args:
        board_json: Board data to validate.

    Returns:
        Tuple of (is_valid, error_message).
    """
    for field in ("width", "height", "tiles"):
        if field not in board_json:
            return False, f"Missing '{field}' field"

    width = board_json["width"]
    height = board_json["height"]
    if not isinstance(width, int) or isinstance(width, bool) or width < 1:
        return False, "'width' must be a positive integer"
    if not isinstance(height, int) or isinstance(height, bool) or height < 1:
        return False, "'height' must be a positive integer"

    tiles = board_json["tiles"]
    if not isinstance(tiles, list):
        return False, "'tiles' must be an array"
    if len(tiles) != width * height:
        return False, f"'tiles' has {len(tiles)} entries, expected {width * height}"

    for i, value in enumerate(tiles):
        if value is None:
            continue
        if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 9:
            return False, f"Tile {i} must be an integer 0-9, got {value!r}"

    return True, None


def board_from_json(board_json: Dict[str, Any]) -> Board:
    """
    Build a Board from its JSON form. Null tiles count as empty.

    Raises:
        InvalidBoardError: If the tile data does not fit the board.
    """
    tiles = [0 if v is None else v for v in board_json.get("tiles", [])]
    return Board(
        width=board_json.get("width", 0),
        height=board_json.get("height", 0),
        tiles=tuple(tiles),
        seed=str(board_json.get("seed", "")),
        is_challenge=bool(board_json.get("is_challenge", False)),
    )


def format_board_for_display(board: Board) -> str:
    """
    Format a board for human-readable display.

    Args:
        board: Board to format.

    Returns:
        Formatted string representation, empty cells shown as dots.
    """
    lines = [f"Board {board.width}x{board.height} ({board.non_zero_count} tiles, sum {board.total}):"]
    lines.append("-" * 40)
    for row in board.to_grid():
        lines.append("  " + " ".join(str(v) if v else "." for v in row))
    return "\n".join(lines)


def extract_digit_statistics(board: Board) -> Dict[str, Any]:
    """
    Extract digit statistics from a board.

    Args:
        board: Board to analyze.

    Returns:
        Dictionary with per-digit and per-class counts.
    """
    stats: Dict[str, Any] = {
        "total_tiles": board.non_zero_count,
        "sum": board.total,
        "digits": {},
        "classes": {"small": 0, "medium": 0, "large": 0},
        "large_adjacencies": count_large_adjacencies(board.tiles, board.height, board.width),
    }

    for value in board.tiles:
        if value <= 0:
            continue
        stats["digits"][value] = stats["digits"].get(value, 0) + 1
        stats["classes"][digit_class(value)] += 1

    return stats


def class_shares(boards: List[Board]) -> Dict[str, float]:
    """Share of small, medium and large digits across several boards."""
    counts = {"small": 0, "medium": 0, "large": 0}
    for board in boards:
        for name, count in extract_digit_statistics(board)["classes"].items():
            counts[name] += count
    total = sum(counts.values())
    if total == 0:
        return {name: 0.0 for name in counts}
    return {name: count / total for name, count in counts.items()}
