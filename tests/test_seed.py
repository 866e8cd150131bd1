"""Tests for the deterministic seed source."""
import re

from maketen.core.seed import (
    SeedState,
    hash_label,
    level_seed_label,
    mint_challenge_seed,
    normalize_seed,
    regeneration_label,
)


class TestHashLabel:
    """Test cases for label hashing."""

    def test_known_values(self):
        """Test the hash of short labels."""
        assert hash_label("") == 0
        assert hash_label("a") == 97
        assert hash_label("ab") == 97 * 31 + 98

    def test_stays_in_32_bits(self):
        """Test that long labels are masked to 32 bits."""
        value = hash_label("challenge_1700000000000_abcdefghi" * 10)
        assert 0 <= value <= 0xFFFFFFFF


class TestSeedState:
    """Test cases for SeedState."""

    def test_first_draw_from_zero(self):
        """Test the first LCG step from state 0."""
        value, state = SeedState(state=0).next_float()
        assert state.state == 12345
        assert value == 12345 / 0x7FFFFFFF

    def test_state_is_not_mutated(self):
        """Test that drawing returns a new state."""
        start = SeedState.from_label("level_1")
        _, after = start.next_float()
        assert start.state == hash_label("level_1")
        assert after is not start
        assert after.label == "level_1"

    def test_same_label_same_stream(self):
        """Test that two streams from the same label match."""
        a = SeedState.from_label("level_12")
        b = SeedState.from_label("level_12")
        for _ in range(50):
            va, a = a.next_float()
            vb, b = b.next_float()
            assert va == vb

    def test_different_labels_differ(self):
        """Test that different labels give different streams."""
        a, _ = SeedState.from_label("level_1").next_float()
        b, _ = SeedState.from_label("level_2").next_float()
        assert a != b

    def test_next_int_in_range(self):
        """Test that next_int stays in [0, bound)."""
        state = SeedState.from_label("ints")
        for _ in range(200):
            value, state = state.next_int(7)
            assert 0 <= value < 7

    def test_next_range_inclusive(self):
        """Test that next_range covers both ends."""
        state = SeedState.from_label("range")
        seen = set()
        for _ in range(500):
            value, state = state.next_range(7, 9)
            seen.add(value)
        assert seen == {7, 8, 9}

    def test_weighted_choice_skips_zero_weight(self):
        """Test that zero-weight items are never chosen."""
        state = SeedState.from_label("weights")
        for _ in range(200):
            item, state = state.weighted_choice(["a", "b", "c"], [1.0, 0.0, 1.0])
            assert item != "b"

    def test_shuffled_is_permutation(self):
        """Test that shuffling keeps every item."""
        items = [1, 2, 3, 4, 5, 6, 7, 8, 9]
        shuffled, _ = SeedState.from_label("shuffle").shuffled(items)
        assert sorted(shuffled) == items
        assert items == [1, 2, 3, 4, 5, 6, 7, 8, 9]


class TestSeedLabels:
    """Test cases for seed labels."""

    def test_level_label(self):
        assert level_seed_label(7) == "level_7"

    def test_regeneration_label(self):
        assert regeneration_label("level_7", 2) == "level_7#2"

    def test_challenge_label_format(self):
        """Test the minted challenge label shape."""
        label = mint_challenge_seed()
        assert re.match(r"^challenge_\d+_[0-9a-z]{9}$", label)

    def test_normalize_seed(self):
        """Test that integer seeds become decimal labels."""
        assert normalize_seed(42) == "42"
        assert normalize_seed("level_3") == "level_3"
