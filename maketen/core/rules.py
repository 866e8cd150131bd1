"""Selection rules and rescue helpers used during play."""
import logging
from typing import List, Tuple

from ..models.board import Board, Selection
from ..models.schemas import CandidateRectangle
from .seed import SeedState
from .solvability import is_solvable, selection_for

logger = logging.getLogger(__name__)


def evaluate_selection(board: Board, rect: CandidateRectangle) -> Selection:
    """
    Evaluate a candidate rectangle against the board.

    Corners outside the board contribute nothing.

    Args:
        board: Current board.
        rect: Rectangle reported by the gesture layer.

    Returns:
        Selection with the non-empty cells inside and their total.
    """
    r1, c1, r2, c2 = rect.normalized()
    return selection_for(board, r1, c1, r2, c2)


def apply_selection(board: Board, rect: CandidateRectangle) -> Tuple[Board, Selection]:
    """
    Clear the rectangle when it sums to ten.

    Returns:
        (board, selection). The board is a new value with the selected cells
        set to 0 when the selection is clearable, and the same board otherwise.
    """
    selection = evaluate_selection(board, rect)
    if not selection.is_clearable:
        logger.debug(f"Rejected selection summing to {selection.total}")
        return board, selection
    return board.with_cleared(selection.cells), selection


def is_board_cleared(board: Board) -> bool:
    """Level complete: no tiles left."""
    return board.is_cleared


def is_stuck(board: Board) -> bool:
    """Tiles remain but no rectangle sums to ten."""
    return not board.is_cleared and not is_solvable(board)


def reshuffle_board(board: Board, seed_state: SeedState) -> Tuple[Board, SeedState]:
    """
    Permute the remaining values over their own positions.

    Empty cells stay empty. The result is not guaranteed solvable; callers
    reshuffle again or fall back to another rescue.

    Args:
        board: Board to reshuffle.
        seed_state: Random stream.

    Returns:
        (new board, advanced seed state)
    """
    positions: List[int] = [i for i, v in enumerate(board.tiles) if v > 0]
    values = [board.tiles[i] for i in positions]
    shuffled, state = seed_state.shuffled(values)

    tiles = list(board.tiles)
    for index, value in zip(positions, shuffled):
        tiles[index] = value
    return board.with_tiles(tiles), state
