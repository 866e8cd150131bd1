"""Tests for the difficulty resolver and level tables."""
import pytest

from maketen.core.difficulty import DifficultyResolver, resolve_difficulty
from maketen.models.leveling_config import (
    LevelPhase,
    calculate_tile_count,
    get_phase_for_level,
)


@pytest.fixture
def resolver(settings):
    """Create resolver instance."""
    return DifficultyResolver(settings)


class TestTileCount:
    """Test cases for the tile-count table."""

    @pytest.mark.parametrize("level,expected", [
        (1, 9),
        (10, 23),
        (11, 27),
        (20, 50),
        (21, 53),
        (30, 80),
        (31, 82),
        (35, 92),
        (46, 120),
        (50, 120),
        (51, 120),
        (500, 120),
    ])
    def test_table_values(self, level, expected):
        assert calculate_tile_count(level) == expected

    def test_levels_below_one_clamp(self, resolver):
        """Test that level 0 and negatives behave like level 1."""
        assert resolver.tile_count(0) == 9
        assert resolver.tile_count(-5) == 9

    def test_challenge_is_fixed(self, resolver):
        """Test that challenge mode ignores the level."""
        assert resolver.tile_count(1, is_challenge=True) == 120
        assert resolver.tile_count(300, is_challenge=True) == 120

    def test_never_decreases(self, resolver):
        """Test that tile count is non-decreasing with level."""
        counts = [resolver.tile_count(level) for level in range(1, 201)]
        assert counts == sorted(counts)
        assert max(counts) <= 120


class TestProfiles:
    """Test cases for difficulty profiles."""

    def test_ratios_sum_to_one(self, resolver):
        """Test that digit ratios sum to 1.0 for every bracket."""
        for level in list(range(1, 201)) + [1000]:
            profile = resolver.profile(level)
            total = profile.small_ratio + profile.medium_ratio + profile.large_ratio
            assert total == pytest.approx(1.0)

    def test_pair_ratios_non_increasing(self, resolver):
        """Test that pair and adjacent ratios never grow with level."""
        profiles = [resolver.profile(level) for level in range(1, 301)]
        for earlier, later in zip(profiles, profiles[1:]):
            assert later.target_pair_ratio <= earlier.target_pair_ratio
            assert later.adjacent_pair_ratio <= earlier.adjacent_pair_ratio

    def test_early_levels_use_narrow_band(self, resolver):
        """Test the narrow fill band of the first brackets."""
        assert resolver.profile(1).max_fill_value == 3
        assert resolver.profile(8).max_fill_value == 6
        assert resolver.profile(30).max_fill_value == 9

    def test_challenge_profile(self):
        """Test the challenge entry."""
        count, profile = resolve_difficulty(1, is_challenge=True)
        assert count == 120
        assert profile.bracket == "challenge"
        assert profile.small_ratio == 0.10
        assert profile.medium_ratio == 0.50
        assert profile.large_ratio == 0.40

    def test_phases(self):
        assert get_phase_for_level(1) == LevelPhase.INTRO
        assert get_phase_for_level(45) == LevelPhase.BALANCED
        assert get_phase_for_level(999) == LevelPhase.MASTER
