"""Solvability checker.

A rectangle is the inclusive bounding box between two corner cells. Its
non-zero contents must sum to exactly ten to be cleared. The gesture layer
validates player selections with the same rule (see rectangle_sum).
"""
from typing import Iterator, List, Optional, Tuple

from ..models.board import Board, Selection


def rectangle_sum(board: Board, r1: int, c1: int, r2: int, c2: int) -> int:
    """Sum of the non-zero values inside the inclusive rectangle."""
    top, bottom = min(r1, r2), max(r1, r2)
    left, right = min(c1, c2), max(c1, c2)
    total = 0
    for row in range(top, bottom + 1):
        for col in range(left, right + 1):
            total += board.cell(row, col)
    return total


def selection_for(board: Board, r1: int, c1: int, r2: int, c2: int) -> Selection:
    """Evaluate the inclusive rectangle between two corners."""
    top, bottom = min(r1, r2), max(r1, r2)
    left, right = min(c1, c2), max(c1, c2)
    cells: List[Tuple[int, int]] = []
    total = 0
    for row in range(top, bottom + 1):
        for col in range(left, right + 1):
            value = board.cell(row, col)
            if value > 0:
                cells.append((row, col))
                total += value
    return Selection(r1=top, c1=left, r2=bottom, c2=right, cells=tuple(cells), total=total)


def _corner_pairs(board: Board) -> Iterator[Tuple[int, int, int, int]]:
    """Every (p1, p2) pair of non-empty cells with p2 >= p1, as corner coordinates."""
    occupied = [i for i, v in enumerate(board.tiles) if v > 0]
    for a, p1 in enumerate(occupied):
        r1, c1 = divmod(p1, board.width)
        for p2 in occupied[a:]:
            r2, c2 = divmod(p2, board.width)
            yield r1, c1, r2, c2


def find_clearable_rectangle(board: Board) -> Optional[Selection]:
    """
    First rectangle that sums to ten, in scan order.

    Args:
        board: Board to scan.

    Returns:
        Selection for the rectangle, or None when the board is stuck.
    """
    for r1, c1, r2, c2 in _corner_pairs(board):
        if rectangle_sum(board, r1, c1, r2, c2) == 10:
            return selection_for(board, r1, c1, r2, c2)
    return None


def is_solvable(board: Board) -> bool:
    """True when at least one rectangle sums to exactly ten."""
    return find_clearable_rectangle(board) is not None


def count_clearable_rectangles(board: Board) -> int:
    """
    Number of distinct rectangles that sum to ten.

    Corner pairs that describe the same bounding box are counted once.
    """
    seen = set()
    for r1, c1, r2, c2 in _corner_pairs(board):
        box = (min(r1, r2), min(c1, c2), max(r1, r2), max(c1, c2))
        if box in seen:
            continue
        if rectangle_sum(board, *box) == 10:
            seen.add(box)
    return len(seen)
