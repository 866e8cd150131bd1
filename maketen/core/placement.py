"""Number placement generator.

Fills a centred rectangle of the grid with digits 1-9: seeded sum-to-ten
pairs first (adjacent, then scattered), then a remainder that brings the
total to a multiple of ten, then a large-digit separation pass.
"""
import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from ..config import Settings, get_settings
from ..models.level import DifficultyProfile, GenerationIssue, IssueRecord
from ..models.leveling_config import CHALLENGE_DIGIT_RANGES, DIGIT_RANGES
from .seed import SeedState

logger = logging.getLogger(__name__)

PAIR_TEMPLATES: List[Tuple[int, int]] = [(1, 9), (2, 8), (3, 7), (4, 6), (5, 5)]
LARGE_DIGITS = (7, 8, 9)
EARLY_BAND_MAX_LEVEL = 10
PERTURBATION_CHANCE = 0.3

# right, down, left, up
_DIRECTIONS = [(0, 1), (1, 0), (0, -1), (-1, 0)]


def digit_class(value: int) -> str:
    """Size class of a digit."""
    for name, (low, high) in DIGIT_RANGES.items():
        if low <= value <= high:
            return name
    raise ValueError(f"Not a tile digit: {value}")


def placement_rect(rows: int, cols: int, tile_count: int) -> Tuple[int, int, int, int]:
    """
    Centred rectangle that receives the numbers.

    Args:
        rows: Grid rows.
        cols: Grid columns.
        tile_count: Requested tile count.

    Returns:
        (start_row, start_col, rect_rows, rect_cols)
    """
    count = max(1, min(tile_count, rows * cols))
    rect_rows = min(rows, math.ceil(math.sqrt(count)))
    rect_cols = min(cols, math.ceil(count / rect_rows))
    if rect_rows * rect_cols < count:
        rect_rows = min(rows, math.ceil(count / rect_cols))
    start_row = (rows - rect_rows) // 2
    start_col = (cols - rect_cols) // 2
    return start_row, start_col, rect_rows, rect_cols


def _neighbours(index: int, rows: int, cols: int) -> List[int]:
    row, col = divmod(index, cols)
    result = []
    for dr, dc in _DIRECTIONS:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            result.append(r * cols + c)
    return result


def _conflict_edges(values: Sequence[int], cells: Sequence[int], rows: int, cols: int) -> set:
    """Equal large-digit edges touching any of the given cells."""
    edges = set()
    for i in cells:
        if values[i] not in LARGE_DIGITS:
            continue
        for n in _neighbours(i, rows, cols):
            if values[n] == values[i]:
                edges.add((min(i, n), max(i, n)))
    return edges


def count_large_adjacencies(values: Sequence[int], rows: int, cols: int) -> int:
    """Number of orthogonal edges joining two equal 7/8/9 digits."""
    return len(_conflict_edges(values, range(len(values)), rows, cols))


def plan_separation_swaps(
    values: Sequence[int], rows: int, cols: int
) -> List[Tuple[int, int]]:
    """
    Propose swaps that separate equal large digits.

    Every proposal is evaluated against the same snapshot. A swap is kept when
    it removes at least one equal large-digit adjacency and introduces none.
    Cells next to an accepted swap are blocked for the rest of the round, so
    all proposals can be applied together.

    Args:
        values: Row-major snapshot.
        rows: Snapshot rows.
        cols: Snapshot columns.

    Returns:
        List of (i, j) index pairs to swap.
    """
    snapshot = tuple(values)
    blocked = set()
    swaps: List[Tuple[int, int]] = []

    edges = _conflict_edges(snapshot, range(len(snapshot)), rows, cols)
    conflicted = sorted({cell for edge in edges for cell in edge})
    for i in conflicted:
        if i in blocked:
            continue
        for j, value in enumerate(snapshot):
            if j == i or j in blocked or value not in LARGE_DIGITS or value == snapshot[i]:
                continue
            before = _conflict_edges(snapshot, (i, j), rows, cols)
            trial = list(snapshot)
            trial[i], trial[j] = trial[j], trial[i]
            after = _conflict_edges(trial, (i, j), rows, cols)
            if len(after) < len(before) and after <= before:
                swaps.append((i, j))
                for cell in (i, j):
                    blocked.add(cell)
                    blocked.update(_neighbours(cell, rows, cols))
                break
    return swaps


def apply_swaps(values: Sequence[int], swaps: Sequence[Tuple[int, int]]) -> Tuple[int, ...]:
    """Apply a round of swaps to a snapshot and return the new values."""
    result = list(values)
    for i, j in swaps:
        result[i], result[j] = result[j], result[i]
    return tuple(result)


@dataclass
class PlacementResult:
    """Output of number placement."""
    values: Tuple[int, ...]
    seed_state: SeedState
    issues: List[IssueRecord] = field(default_factory=list)
    pair_count: int = 0
    adjacent_pair_count: int = 0
    placed_count: int = 0
    separation_rounds: int = 0


class NumberPlacer:
    """Places digits for one board."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def place(
        self,
        rows: int,
        cols: int,
        tile_count: int,
        profile: DifficultyProfile,
        seed_state: SeedState,
        level: int = 1,
        is_challenge: bool = False,
    ) -> PlacementResult:
        """
        Fill a rows x cols grid.

        Args:
            rows: Grid rows.
            cols: Grid columns.
            tile_count: Requested tile count.
            profile: Difficulty profile.
            seed_state: Random stream to draw from.
            level: Level number, selects the early fill band.
            is_challenge: Use the challenge remainder draw.

        Returns:
            PlacementResult with the full row-major grid and advanced seed state.
        """
        start_row, start_col, rect_rows, rect_cols = placement_rect(rows, cols, tile_count)
        count = max(1, min(tile_count, rows * cols))
        run = _PlacementRun(rect_rows, rect_cols, count, seed_state, self.settings)

        pair_count = int(math.floor(run.size / 2 * profile.target_pair_ratio))
        adjacent_target = int(math.floor(pair_count * profile.adjacent_pair_ratio))

        adjacent_placed = run.place_adjacent_pairs(adjacent_target, profile)
        scattered_placed = run.place_scattered_pairs(pair_count - adjacent_placed, profile)

        remainder = run.unfilled()
        if len(remainder) == 1 and run.pairs:
            remainder = run.release_last_pair()
            if scattered_placed:
                scattered_placed -= 1
            else:
                adjacent_placed -= 1

        if is_challenge:
            run.fill_challenge(remainder, profile)
        elif level <= EARLY_BAND_MAX_LEVEL:
            run.fill_early_band(remainder, profile.max_fill_value)
        else:
            run.fill_standard(remainder, profile)

        rounds = run.separate()

        values = [0] * (rows * cols)
        for local, value in enumerate(run.values):
            r, c = divmod(local, rect_cols)
            values[(start_row + r) * cols + start_col + c] = value

        logger.debug(
            f"Placed {run.size} tiles in {rect_rows}x{rect_cols}: "
            f"{adjacent_placed} adjacent + {scattered_placed} scattered pairs, "
            f"{len(remainder)} remainder, {rounds} separation rounds"
        )
        return PlacementResult(
            values=tuple(values),
            seed_state=run.state,
            issues=run.issues,
            pair_count=len(run.pairs),
            adjacent_pair_count=adjacent_placed,
            placed_count=run.size,
            separation_rounds=rounds,
        )


class _PlacementRun:
    """Working state for a single placement call."""

    def __init__(self, rows: int, cols: int, count: int, state: SeedState, settings: Settings):
        self.rows = rows
        self.cols = cols
        self.size = count
        self.values = [0] * (rows * cols)
        self.state = state
        self.settings = settings
        self.issues: List[IssueRecord] = []
        self.pairs: List[Tuple[int, int]] = []

    def stall(self, detail: str) -> None:
        logger.warning(f"Placement stalled: {detail}")
        self.issues.append(IssueRecord(GenerationIssue.GENERATION_STALLED, detail))

    def unfilled(self) -> List[int]:
        return [i for i in range(self.size) if self.values[i] == 0]

    def draw(self) -> float:
        value, self.state = self.state.next_float()
        return value

    def pick_template(self, profile: DifficultyProfile) -> Tuple[int, int]:
        # Weighted by the class of the larger digit
        weights = [_class_ratio(profile, digit_class(high)) for _, high in PAIR_TEMPLATES]
        (a, b), self.state = self.state.weighted_choice(PAIR_TEMPLATES, weights)
        if self.draw() < 0.5:
            a, b = b, a
        return a, b

    def place_adjacent_pairs(self, quota: int, profile: DifficultyProfile) -> int:
        placed = 0
        attempts_cap = self.settings.pair_placement_attempts
        for _ in range(quota):
            done = False
            for _attempt in range(attempts_cap):
                free = self.unfilled()
                if len(free) < 2:
                    break
                cell, self.state = self.state.choice(free)
                partner = next(
                    (n for n in _neighbours(cell, self.rows, self.cols)
                     if n < self.size and self.values[n] == 0),
                    None,
                )
                if partner is None:
                    continue
                a, b = self.pick_template(profile)
                self.values[cell], self.values[partner] = a, b
                self.pairs.append((cell, partner))
                done = True
                break
            if not done:
                self.stall(f"adjacent pair {placed + 1}/{quota} not placed after {attempts_cap} attempts")
                break
            placed += 1
        return placed

    def place_scattered_pairs(self, quota: int, profile: DifficultyProfile) -> int:
        placed = 0
        for _ in range(max(0, quota)):
            free = self.unfilled()
            if len(free) < 2:
                break
            first, self.state = self.state.choice(free)
            free.remove(first)
            second, self.state = self.state.choice(free)
            a, b = self.pick_template(profile)
            self.values[first], self.values[second] = a, b
            self.pairs.append((first, second))
            placed += 1
        return placed

    def release_last_pair(self) -> List[int]:
        # A single remainder cell cannot always reach a multiple of ten
        first, second = self.pairs.pop()
        self.values[first] = 0
        self.values[second] = 0
        return self.unfilled()

    def current_total(self) -> int:
        return sum(self.values)

    def fill_early_band(self, cells: List[int], band_max: int) -> None:
        if not cells:
            return
        for i in cells:
            self.values[i] = 1
        need = (10 - self.current_total() % 10) % 10
        for cap in (band_max, 9):
            for i in cells:
                if need == 0:
                    return
                raise_by = min(need, cap - self.values[i])
                if raise_by > 0:
                    self.values[i] += raise_by
                    need -= raise_by
        if need:
            self.stall(f"early band fill left {need} short of a multiple of ten")

    def fill_challenge(self, cells: List[int], profile: DifficultyProfile) -> None:
        if not cells:
            return
        r = len(cells)
        small = int(math.floor(r * profile.small_ratio))
        medium = int(math.floor(r * profile.medium_ratio))
        classes = ["small"] * small + ["medium"] * medium + ["large"] * (r - small - medium)

        drawn = []
        for name in classes:
            low, high = CHALLENGE_DIGIT_RANGES[name]
            value, self.state = self.state.next_range(low, high)
            drawn.append(value)
        drawn, self.state = self.state.shuffled(drawn)
        for i, value in zip(cells, drawn):
            self.values[i] = value

        self.adjust_to_target(cells, self._target(cells, sum(drawn)))

    def fill_standard(self, cells: List[int], profile: DifficultyProfile) -> None:
        if not cells:
            return
        r = len(cells)
        target = self._target(cells, r * expected_digit(profile))
        fixed = self.current_total()
        average = int(round((target - fixed) / r))
        for i in cells:
            self.values[i] = max(1, min(9, average))
        self.adjust_to_target(cells, target)
        self.perturb(cells, profile)

    def _target(self, cells: List[int], remainder_sum: float) -> int:
        """Multiple of ten the remainder should bring the total to."""
        members = set(cells)
        fixed = sum(v for i, v in enumerate(self.values) if i not in members)
        low = fixed + len(cells)
        high = fixed + 9 * len(cells)
        target = int(math.ceil((fixed + remainder_sum) / 10.0)) * 10
        if target < low:
            target = int(math.ceil(low / 10.0)) * 10
        if target > high:
            target = (high // 10) * 10
        return target

    def adjust_to_target(self, cells: List[int], target: int) -> None:
        for _ in range(self.settings.adjustment_passes):
            diff = target - self.current_total()
            if diff == 0:
                return
            step = 1 if diff > 0 else -1
            for i in cells:
                if diff == 0:
                    break
                if 1 <= self.values[i] + step <= 9:
                    self.values[i] += step
                    diff -= step

        if self.current_total() == target:
            return

        # Fallback: all ones, then top up from the end
        for i in cells:
            self.values[i] = 1
        need = target - self.current_total()
        for i in reversed(cells):
            if need <= 0:
                break
            raise_by = min(need, 8)
            self.values[i] += raise_by
            need -= raise_by
        self.stall(f"remainder adjustment did not converge, target {target}")

    def perturb(self, cells: List[int], profile: DifficultyProfile) -> None:
        """
        Sum-preserving moves toward the profile's digit mix.

        Cell i is redrawn from a class picked by the profile ratios and its
        neighbour in the list absorbs the difference, clamped so both stay
        within 1-9.
        """
        names = ["small", "medium", "large"]
        weights = [profile.small_ratio, profile.medium_ratio, profile.large_ratio]
        for i, j in zip(cells, cells[1:]):
            if self.draw() >= PERTURBATION_CHANCE:
                continue
            name, self.state = self.state.weighted_choice(names, weights)
            low, high = DIGIT_RANGES[name]
            wanted, self.state = self.state.next_range(low, high)
            delta = wanted - self.values[i]
            delta = max(delta, self.values[j] - 9)
            delta = min(delta, self.values[j] - 1)
            self.values[i] += delta
            self.values[j] -= delta

    def separate(self) -> int:
        rounds = 0
        values = tuple(self.values)
        for _ in range(self.settings.separation_rounds):
            swaps = plan_separation_swaps(values, self.rows, self.cols)
            if not swaps:
                break
            values = apply_swaps(values, swaps)
            rounds += 1
        self.values = list(values)
        return rounds


def _class_ratio(profile: DifficultyProfile, name: str) -> float:
    return {
        "small": profile.small_ratio,
        "medium": profile.medium_ratio,
        "large": profile.large_ratio,
    }[name]


def expected_digit(profile: DifficultyProfile) -> float:
    """Mean remainder digit for a profile, using the middle of each class range."""
    return sum(
        _class_ratio(profile, name) * (low + high) / 2.0
        for name, (low, high) in DIGIT_RANGES.items()
    )


_placer: Optional[NumberPlacer] = None


def get_placer() -> NumberPlacer:
    """Get or create number placer singleton instance."""
    global _placer
    if _placer is None:
        _placer = NumberPlacer()
    return _placer


def place_numbers(
    rows: int,
    cols: int,
    tile_count: int,
    profile: DifficultyProfile,
    seed_state: SeedState,
    level: int = 1,
    is_challenge: bool = False,
    settings: Optional[Settings] = None,
) -> PlacementResult:
    """Module-level shortcut for NumberPlacer.place."""
    placer = NumberPlacer(settings) if settings is not None else get_placer()
    return placer.place(rows, cols, tile_count, profile, seed_state, level, is_challenge)
