"""Level data models and structures."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .board import Board
from .layout import Layout


@dataclass(frozen=True)
class DifficultyProfile:
    """
    Per-level tuning for number placement.

    Attributes:
        bracket: Name of the level bracket this profile belongs to.
        small_ratio: Share of digits drawn from 1-3.
        medium_ratio: Share drawn from 4-6.
        large_ratio: Share drawn from 7-9.
        target_pair_ratio: Fraction of tiles seeded as sum-to-ten pairs.
        adjacent_pair_ratio: Fraction of those pairs placed side by side.
        max_fill_value: Largest remainder value for the easy fill band.
    """
    bracket: str
    small_ratio: float
    medium_ratio: float
    large_ratio: float
    target_pair_ratio: float
    adjacent_pair_ratio: float
    max_fill_value: int = 9

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "bracket": self.bracket,
            "small_ratio": self.small_ratio,
            "medium_ratio": self.medium_ratio,
            "large_ratio": self.large_ratio,
            "target_pair_ratio": self.target_pair_ratio,
            "adjacent_pair_ratio": self.adjacent_pair_ratio,
            "max_fill_value": self.max_fill_value,
        }


class GenerationStatus(str, Enum):
    """Outcome of a generate_board call."""
    OK = "ok"
    DEGRADED = "degraded"
    FAILED_AFTER_RETRIES = "failed_after_retries"


class GenerationIssue(str, Enum):
    """Non-fatal conditions recorded during generation."""
    LAYOUT_INFEASIBLE = "layout_infeasible"
    GENERATION_STALLED = "generation_stalled"
    SUM_INVARIANT_VIOLATION = "sum_invariant_violation"
    UNSOLVABLE_BOARD = "unsolvable_board"


@dataclass(frozen=True)
class IssueRecord:
    """Single issue found while generating a board."""
    code: GenerationIssue
    detail: str

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary."""
        return {"code": self.code.value, "detail": self.detail}


@dataclass
class GenerationResult:
    """Result of board generation."""
    board: Board
    layout: Layout
    profile: DifficultyProfile
    tile_count: int
    level: Optional[int] = None
    status: GenerationStatus = GenerationStatus.OK
    issues: List[IssueRecord] = field(default_factory=list)
    attempts: int = 1
    generation_time_ms: int = 0

    @property
    def is_solvable(self) -> bool:
        """False only when every regeneration attempt came back unsolvable."""
        return self.status != GenerationStatus.FAILED_AFTER_RETRIES

    def has_issue(self, code: GenerationIssue) -> bool:
        """Check whether an issue code was recorded."""
        return any(issue.code == code for issue in self.issues)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "level": self.level,
            "tile_count": self.tile_count,
            "board": self.board.to_dict(),
            "layout": self.layout.to_dict(),
            "profile": self.profile.to_dict(),
            "status": self.status.value,
            "issues": [issue.to_dict() for issue in self.issues],
            "attempts": self.attempts,
            "generation_time_ms": self.generation_time_ms,
        }
