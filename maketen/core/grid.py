"""Grid dimension solver."""
import math
from typing import Iterator, Tuple


def iter_grid_candidates(tile_count: int) -> Iterator[Tuple[int, int]]:
    """
    Yield every (rows, cols) shape that holds tile_count tiles.

    For each row count r in 1..N, cols is ceil(N / r).
    """
    n = max(1, tile_count)
    for rows in range(1, n + 1):
        cols = math.ceil(n / rows)
        if rows * cols >= n:
            yield rows, cols


def solve_grid_dimensions(tile_count: int, target_aspect: float) -> Tuple[int, int]:
    """
    Choose the (rows, cols) shape whose cols/rows is closest to target_aspect.

    Exhaustive O(N) search; ties keep the first candidate found, which is
    the one with fewer rows.

    Args:
        tile_count: Number of tiles to hold.
        target_aspect: Display width divided by usable height.

    Returns:
        (rows, cols) with rows * cols >= tile_count.
    """
    if tile_count <= 0:
        return 1, 1

    best = (1, tile_count)
    best_diff = math.inf
    for rows, cols in iter_grid_candidates(tile_count):
        diff = abs(cols / rows - target_aspect)
        if diff < best_diff:
            best_diff = diff
            best = (rows, cols)
    return best


def fallback_grid_dimensions(tile_count: int) -> Tuple[int, int]:
    """Near-square shape used when the minimum tile size is forced."""
    n = max(1, tile_count)
    rows = math.ceil(math.sqrt(n))
    return rows, math.ceil(n / rows)
