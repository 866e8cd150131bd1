"""Deterministic seed source.

Every random draw returns the value together with the next SeedState, so
callers thread the state explicitly and two runs from the same label stay
bit-for-bit identical.
"""
import random
import string
import time
from dataclasses import dataclass
from typing import List, Sequence, Tuple, TypeVar, Union

T = TypeVar("T")

_HASH_MASK = 0xFFFFFFFF
_STATE_MASK = 0x7FFFFFFF
_MULTIPLIER = 1103515245
_INCREMENT = 12345
_TOKEN_ALPHABET = string.digits + string.ascii_lowercase


def hash_label(label: str) -> int:
    """32-bit string hash used to turn a seed label into an initial state."""
    h = 0
    for ch in label:
        h = ((h << 5) - h + ord(ch)) & _HASH_MASK
    return h


@dataclass(frozen=True)
class SeedState:
    """
    Immutable linear congruential generator state.

    Attributes:
        state: Current generator state.
        label: Seed label the stream started from.
    """
    state: int
    label: str = ""

    @classmethod
    def from_label(cls, label: str) -> "SeedState":
        """Create the initial state for a seed label."""
        return cls(state=hash_label(label), label=label)

    def next_float(self) -> Tuple[float, "SeedState"]:
        """Draw a float in [0, 1] and return it with the advanced state."""
        nxt = (self.state * _MULTIPLIER + _INCREMENT) & _STATE_MASK
        return nxt / _STATE_MASK, SeedState(state=nxt, label=self.label)

    def next_int(self, bound: int) -> Tuple[int, "SeedState"]:
        """Draw an int in [0, bound)."""
        r, state = self.next_float()
        return min(bound - 1, int(r * bound)), state

    def next_range(self, low: int, high: int) -> Tuple[int, "SeedState"]:
        """Draw an int in [low, high] inclusive."""
        value, state = self.next_int(high - low + 1)
        return low + value, state

    def choice(self, items: Sequence[T]) -> Tuple[T, "SeedState"]:
        """Pick one item uniformly."""
        idx, state = self.next_int(len(items))
        return items[idx], state

    def weighted_choice(
        self, items: Sequence[T], weights: Sequence[float]
    ) -> Tuple[T, "SeedState"]:
        """Pick one item with probability proportional to its weight."""
        total = sum(weights)
        r, state = self.next_float()
        if total <= 0:
            return items[min(len(items) - 1, int(r * len(items)))], state

        threshold = r * total
        running = 0.0
        for item, weight in zip(items, weights):
            running += weight
            if threshold < running:
                return item, state
        return items[-1], state

    def shuffled(self, items: Sequence[T]) -> Tuple[List[T], "SeedState"]:
        """Fisher-Yates shuffle into a new list."""
        result = list(items)
        state = self
        for i in range(len(result) - 1, 0, -1):
            j, state = state.next_int(i + 1)
            result[i], result[j] = result[j], result[i]
        return result, state


def level_seed_label(level: int) -> str:
    """Seed label for a regular level."""
    return f"level_{level}"


def regeneration_label(label: str, attempt: int) -> str:
    """Seed label for the n-th regeneration of a rejected board."""
    return f"{label}#{attempt}"


def mint_challenge_seed() -> str:
    """
    Mint a fresh challenge seed label.

    This is the only non-deterministic call in the engine; the returned label
    reproduces the same board when passed back to generate_board.
    """
    token = "".join(random.choices(_TOKEN_ALPHABET, k=9))
    return f"challenge_{int(time.time() * 1000)}_{token}"


def normalize_seed(seed: Union[str, int]) -> str:
    """Turn a caller supplied seed into a label."""
    return seed if isinstance(seed, str) else str(int(seed))
