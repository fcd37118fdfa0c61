"""Seeded random number generator shared by every part of the combat engine.

Wraps Python's random.Random so that a single long-lived instance can be
injected into the spawner, the turn engine and the player agents.  Tests
substitute a scripted subclass to force special abilities and rolls.
Sub-systems that should not perturb each other (combat, agent decisions)
use a *forked* RNG.
"""

from __future__ import annotations

import hashlib
import random
from typing import Sequence, TypeVar

T = TypeVar("T")


class GameRNG:
    """Deterministic RNG that can be forked into independent sub-streams.

    Parameters
    ----------
    seed:
        Integer seed for the underlying Mersenne Twister.
    """

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    # -- public properties ---------------------------------------------------

    @property
    def seed(self) -> int:
        """Return the seed this RNG was initialised with."""
        return self._seed

    # -- core random methods -------------------------------------------------

    def random_int(self, low: int, high: int) -> int:
        """Return a random integer *N* such that ``low <= N <= high``."""
        return self._rng.randint(low, high)

    def random_float(self) -> float:
        """Return a random float in the half-open interval ``[0.0, 1.0)``."""
        return self._rng.random()

    def random_choice(self, seq: Sequence[T]) -> T:
        """Return a random element from a non-empty sequence."""
        return self._rng.choice(seq)

    def shuffle(self, lst: list[T]) -> None:
        """Shuffle *lst* in-place."""
        self._rng.shuffle(lst)

    def chance(self, probability: float) -> bool:
        """Return ``True`` with the given *probability* (0.0 -- 1.0)."""
        return self.random_float() < probability

    def weighted_pick(self, weights: Sequence[float]) -> int:
        """Pick an index with probability proportional to its weight.

        Weights are normalised to sum to 1, a uniform ``r`` is drawn from
        ``[0, 1)`` and the first index whose cumulative weight exceeds ``r``
        is returned.  If floating-point rounding leaves ``r`` uncovered, the
        last index with a positive weight is returned instead, so the final
        bucket can never be excluded.

        Raises
        ------
        ValueError
            If *weights* is empty, contains a negative value, or sums to 0.
        """
        if not weights:
            raise ValueError("weighted_pick requires at least one weight")
        if any(w < 0 for w in weights):
            raise ValueError(f"weights must be >= 0, got {list(weights)}")
        total = sum(weights)
        if total <= 0:
            raise ValueError("weighted_pick requires a positive total weight")

        r = self.random_float()
        cumulative = 0.0
        for idx, weight in enumerate(weights):
            cumulative += weight / total
            if r < cumulative:
                return idx

        return max(i for i, w in enumerate(weights) if w > 0)

    # -- forking -------------------------------------------------------------

    def fork(self, name: str) -> GameRNG:
        """Create a child RNG whose seed is derived from this RNG's seed and
        *name*.

        Forking with the same *name* always produces the same child seed,
        which lets the combat stream and the agent stream stay independent.
        """
        digest = hashlib.sha256(f"{self._seed}:{name}".encode()).digest()
        child_seed = int.from_bytes(digest[:8], "big")
        return GameRNG(child_seed)

    # -- dunder helpers ------------------------------------------------------

    def __repr__(self) -> str:
        return f"GameRNG(seed={self._seed})"
