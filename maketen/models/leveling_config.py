"""
Level progression tables for the make-ten board.

Two independent tables drive every level:

1. Tile count: grows through level brackets and saturates at the board
   ceiling. Early boards stay small so they can be cleared completely.
2. Difficulty bracket: digit mix, seeded pair ratio and how many of those
   pairs sit side by side. Early brackets are mostly small digits in
   obvious adjacent pairs; late brackets lean on large digits and pairs
   that are scattered across the board.

Challenge mode ignores the level and always uses its own fixed entry.
"""
import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

from .level import DifficultyProfile


class LevelPhase(str, Enum):
    """Level progression phase"""
    INTRO = "intro"             # 1-5: small digits, almost all pairs adjacent
    WARMUP = "warmup"           # 6-10
    EASY = "easy"               # 11-20
    STANDARD = "standard"       # 21-40
    BALANCED = "balanced"       # 41-50
    HARD = "hard"               # 51-100: more large digits
    EXPERT = "expert"           # 101-150
    MASTER = "master"           # 151+: large digits dominate
    CHALLENGE = "challenge"     # challenge mode, level independent


# =========================================================
# Tile count progression
# =========================================================
# tiles = floor(base + per_level * (level - offset)), capped at `cap`
#
# - Level 1-10:  9 -> 23   (guaranteed fully clearable)
# - Level 11-20: 27 -> 50
# - Level 21-30: 53 -> 80
# - Level 31-50: 82 -> 120 (hits the ceiling at level 46)
# - Level 51+:   120 fixed, difficulty comes from digit mix instead
# =========================================================

@dataclass(frozen=True)
class TileCountRule:
    """Linear tile-count rule for one level bracket"""
    level_range: Tuple[int, int]
    base: float
    per_level: float
    offset: int
    cap: int = 120

    def tile_count(self, level: int) -> int:
        return min(self.cap, int(math.floor(self.base + self.per_level * (level - self.offset))))


TILE_COUNT_RULES: List[TileCountRule] = [
    TileCountRule(level_range=(1, 10), base=8, per_level=1.5, offset=0),
    TileCountRule(level_range=(11, 20), base=25, per_level=2.5, offset=10),
    TileCountRule(level_range=(21, 30), base=50, per_level=3, offset=20),
    TileCountRule(level_range=(31, 50), base=80, per_level=2.5, offset=30),
    TileCountRule(level_range=(51, 10 ** 9), base=120, per_level=0, offset=50),
]

MIN_LEVEL = 1
CHALLENGE_TILE_COUNT = 120


# =========================================================
# Difficulty brackets
# =========================================================
# small = 1-3, medium = 4-6, large = 7-9 (ratios sum to 1.0)
# pair ratio and adjacent ratio never increase with level
# =========================================================

@dataclass(frozen=True)
class BracketConfig:
    """Difficulty settings for a level bracket"""
    phase: LevelPhase
    level_range: Tuple[int, int]
    profile: DifficultyProfile


def _profile(
    name: str,
    small: float,
    medium: float,
    large: float,
    pair: float,
    adjacent: float,
    max_fill: int = 9,
) -> DifficultyProfile:
    return DifficultyProfile(
        bracket=name,
        small_ratio=small,
        medium_ratio=medium,
        large_ratio=large,
        target_pair_ratio=pair,
        adjacent_pair_ratio=adjacent,
        max_fill_value=max_fill,
    )


BRACKET_CONFIGS: List[BracketConfig] = [
    BracketConfig(LevelPhase.INTRO, (1, 5),
                  _profile("intro", 0.90, 0.10, 0.00, 0.95, 0.90, max_fill=3)),
    BracketConfig(LevelPhase.WARMUP, (6, 10),
                  _profile("warmup", 0.70, 0.25, 0.05, 0.85, 0.80, max_fill=6)),
    BracketConfig(LevelPhase.EASY, (11, 15),
                  _profile("easy", 0.70, 0.25, 0.05, 0.75, 0.70)),
    BracketConfig(LevelPhase.EASY, (16, 20),
                  _profile("easy", 0.60, 0.30, 0.10, 0.75, 0.70)),
    BracketConfig(LevelPhase.STANDARD, (21, 30),
                  _profile("standard", 0.60, 0.30, 0.10, 0.65, 0.60)),
    BracketConfig(LevelPhase.STANDARD, (31, 40),
                  _profile("standard", 0.50, 0.40, 0.10, 0.65, 0.60)),
    BracketConfig(LevelPhase.BALANCED, (41, 50),
                  _profile("balanced", 0.50, 0.40, 0.10, 0.55, 0.50)),
    BracketConfig(LevelPhase.HARD, (51, 100),
                  _profile("hard", 0.30, 0.40, 0.30, 0.45, 0.40)),
    BracketConfig(LevelPhase.EXPERT, (101, 150),
                  _profile("expert", 0.20, 0.40, 0.40, 0.35, 0.30)),
    BracketConfig(LevelPhase.MASTER, (151, 10 ** 9),
                  _profile("master", 0.10, 0.30, 0.60, 0.30, 0.25)),
]

CHALLENGE_BRACKET = BracketConfig(
    LevelPhase.CHALLENGE,
    (0, 0),
    _profile("challenge", 0.10, 0.50, 0.40, 0.30, 0.25),
)

# Digit ranges per size class
DIGIT_RANGES: Dict[str, Tuple[int, int]] = {
    "small": (1, 3),
    "medium": (4, 6),
    "large": (7, 9),
}

# Challenge remainder digits use a shifted split: fewer 1-2, more 3-6
CHALLENGE_DIGIT_RANGES: Dict[str, Tuple[int, int]] = {
    "small": (1, 2),
    "medium": (3, 6),
    "large": (7, 9),
}


# =========================================================
# Helper functions
# =========================================================

def clamp_level(level_number: int) -> int:
    """Clamp a level number to the first defined bracket"""
    return max(MIN_LEVEL, int(level_number))


def get_tile_count_rule(level_number: int) -> TileCountRule:
    """Tile-count rule for a level"""
    level_number = clamp_level(level_number)
    for rule in TILE_COUNT_RULES:
        if rule.level_range[0] <= level_number <= rule.level_range[1]:
            return rule
    return TILE_COUNT_RULES[-1]


def calculate_tile_count(level_number: int, ceiling: int = CHALLENGE_TILE_COUNT) -> int:
    """Number of tiles placed for a level"""
    level_number = clamp_level(level_number)
    return min(ceiling, get_tile_count_rule(level_number).tile_count(level_number))


def get_bracket_config(level_number: int) -> BracketConfig:
    """Difficulty bracket for a level"""
    level_number = clamp_level(level_number)
    for config in BRACKET_CONFIGS:
        if config.level_range[0] <= level_number <= config.level_range[1]:
            return config
    return BRACKET_CONFIGS[-1]


def get_phase_for_level(level_number: int) -> LevelPhase:
    """Progression phase for a level"""
    return get_bracket_config(level_number).phase
