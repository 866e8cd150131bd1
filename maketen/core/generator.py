"""Board generator engine with a solvability gate."""
import logging
import time
from typing import List, Optional, Union

from ..config import Settings, get_settings
from ..models.board import Board
from ..models.layout import FitStrategy
from ..models.level import (
    GenerationIssue,
    GenerationResult,
    GenerationStatus,
    IssueRecord,
)
from ..models.leveling_config import clamp_level
from ..models.schemas import DisplayBounds
from .difficulty import DifficultyResolver
from .layout import LayoutEngine
from .placement import NumberPlacer
from .seed import (
    SeedState,
    level_seed_label,
    mint_challenge_seed,
    normalize_seed,
    regeneration_label,
)
from .solvability import is_solvable

logger = logging.getLogger(__name__)


class BoardGenerator:
    """Generates boards for a level or a challenge."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.resolver = DifficultyResolver(self.settings)
        self.layout_engine = LayoutEngine(self.settings)
        self.placer = NumberPlacer(self.settings)

    def default_bounds(self) -> DisplayBounds:
        """Display bounds for the configured default screen."""
        return DisplayBounds.from_screen(
            self.settings.default_screen_width,
            self.settings.default_screen_height,
            self.settings,
        )

    def generate(
        self,
        level: int,
        seed: Optional[Union[str, int]] = None,
        is_challenge: bool = False,
        bounds: Optional[DisplayBounds] = None,
    ) -> GenerationResult:
        """
        Generate a board.

        Args:
            level: Level number (ignored for tile count and profile in
                challenge mode).
            seed: Seed label or integer. Derived from the level, or minted
                for a challenge, when omitted.
            is_challenge: Generate a challenge board.
            bounds: Display area for the layout; defaults to the configured
                screen minus the reserved bands.

        Returns:
            GenerationResult with board, layout and any recorded issues.
        """
        start_time = time.time()
        level = clamp_level(level)
        bounds = bounds or self.default_bounds()

        tile_count, profile = self.resolver.resolve(level, is_challenge)
        layout = self.layout_engine.compute(
            tile_count, bounds, level=None if is_challenge else level
        )

        base_issues: List[IssueRecord] = []
        if layout.strategy == FitStrategy.FORCED:
            base_issues.append(IssueRecord(
                GenerationIssue.LAYOUT_INFEASIBLE,
                f"{tile_count} tiles forced to {layout.rows}x{layout.cols} "
                f"at tile size {layout.tile_size} (overflows={layout.overflows})",
            ))

        if seed is None:
            label = mint_challenge_seed() if is_challenge else level_seed_label(level)
        else:
            label = normalize_seed(seed)

        max_attempts = max(1, self.settings.max_regeneration_attempts)
        board: Optional[Board] = None
        issues: List[IssueRecord] = []
        attempts = 0
        solvable = False

        while attempts < max_attempts:
            attempt_label = label if attempts == 0 else regeneration_label(label, attempts)
            attempts += 1

            placement = self.placer.place(
                layout.rows,
                layout.cols,
                tile_count,
                profile,
                SeedState.from_label(attempt_label),
                level=level,
                is_challenge=is_challenge,
            )
            board = Board(
                width=layout.cols,
                height=layout.rows,
                tiles=placement.values,
                seed=label,
                is_challenge=is_challenge,
            )
            issues = list(placement.issues)

            if not is_challenge and board.total % 10 != 0:
                logger.error(
                    f"Level {level}: tile sum {board.total} is not a multiple of ten "
                    f"(seed {attempt_label})"
                )
                issues.append(IssueRecord(
                    GenerationIssue.SUM_INVARIANT_VIOLATION,
                    f"sum {board.total} is not a multiple of ten",
                ))

            if is_solvable(board):
                solvable = True
                break

            logger.warning(
                f"Level {level}: board from seed {attempt_label} is unsolvable, "
                f"regenerating ({attempts}/{max_attempts})"
            )

        if not solvable:
            issues.append(IssueRecord(
                GenerationIssue.UNSOLVABLE_BOARD,
                f"no clearable rectangle after {attempts} attempts",
            ))

        all_issues = base_issues + issues
        if not solvable:
            status = GenerationStatus.FAILED_AFTER_RETRIES
        elif all_issues:
            status = GenerationStatus.DEGRADED
        else:
            status = GenerationStatus.OK

        generation_time_ms = int((time.time() - start_time) * 1000)
        subject = "challenge" if is_challenge else f"level {level}"
        logger.info(
            f"Generated {subject} board "
            f"{layout.rows}x{layout.cols} ({tile_count} tiles, seed {label}) "
            f"status={status.value} in {generation_time_ms}ms"
        )

        return GenerationResult(
            board=board,
            layout=layout,
            profile=profile,
            tile_count=tile_count,
            level=level,
            status=status,
            issues=all_issues,
            attempts=attempts,
            generation_time_ms=generation_time_ms,
        )


# Singleton instance
_generator = None


def get_generator() -> BoardGenerator:
    """Get or create board generator singleton instance."""
    global _generator
    if _generator is None:
        _generator = BoardGenerator()
    return _generator


def generate_board(
    level: int,
    seed: Optional[Union[str, int]] = None,
    is_challenge: bool = False,
    bounds: Optional[DisplayBounds] = None,
    settings: Optional[Settings] = None,
) -> GenerationResult:
    """
    Generate a board for a level or challenge.

    Same (level, seed, challenge flag, bounds) gives the same board.
    """
    generator = BoardGenerator(settings) if settings is not None else get_generator()
    return generator.generate(level, seed=seed, is_challenge=is_challenge, bounds=bounds)
