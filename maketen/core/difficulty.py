"""Difficulty resolver: level number -> tile count and placement profile."""
from typing import Optional, Tuple

from ..config import Settings, get_settings
from ..models.level import DifficultyProfile
from ..models.leveling_config import (
    CHALLENGE_BRACKET,
    calculate_tile_count,
    clamp_level,
    get_bracket_config,
)


class DifficultyResolver:
    """Maps levels to tile counts and difficulty profiles."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def tile_count(self, level: int, is_challenge: bool = False) -> int:
        """
        Number of tiles to place.

        Args:
            level: Level number; values below 1 clamp to 1.
            is_challenge: Challenge mode ignores the level.

        Returns:
            Tile count, never above the configured ceiling.
        """
        if is_challenge:
            return self.settings.challenge_tile_count
        return calculate_tile_count(clamp_level(level), ceiling=self.settings.max_tile_count)

    def profile(self, level: int, is_challenge: bool = False) -> DifficultyProfile:
        """Difficulty profile for a level (or the challenge profile)."""
        if is_challenge:
            return CHALLENGE_BRACKET.profile
        return get_bracket_config(level).profile

    def resolve(self, level: int, is_challenge: bool = False) -> Tuple[int, DifficultyProfile]:
        """Resolve tile count and profile in one call."""
        return self.tile_count(level, is_challenge), self.profile(level, is_challenge)


def resolve_difficulty(
    level: int,
    is_challenge: bool = False,
    settings: Optional[Settings] = None,
) -> Tuple[int, DifficultyProfile]:
    """
    Resolve a level into (tile_count, DifficultyProfile).

    Args:
        level: Level number.
        is_challenge: Use the fixed challenge entry instead of the level.
        settings: Optional settings override.

    Returns:
        Tuple of tile count and profile.
    """
    return DifficultyResolver(settings).resolve(level, is_challenge)
