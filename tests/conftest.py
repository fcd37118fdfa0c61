"""Shared fixtures: a seeded RNG and a scripted RNG test double."""

from __future__ import annotations

from typing import Iterable

import pytest

from combatgame.sim.core.rng import GameRNG


class ScriptedRNG(GameRNG):
    """GameRNG whose results can be queued up front.

    ``random_int`` pops from *ints* (falling back to ``low``), ``chance``
    pops from *chances* (falling back to ``False``, so no special ability
    triggers unless asked) and ``random_float`` pops from *floats*
    (falling back to the seeded stream).
    """

    def __init__(
        self,
        ints: Iterable[int] = (),
        chances: Iterable[bool] = (),
        floats: Iterable[float] = (),
        seed: int = 0,
    ) -> None:
        super().__init__(seed)
        self.ints = list(ints)
        self.chances = list(chances)
        self.floats = list(floats)
        self.int_calls: list[tuple[int, int]] = []
        self.chance_calls: list[float] = []

    def random_int(self, low: int, high: int) -> int:
        self.int_calls.append((low, high))
        if not self.ints:
            return low
        value = self.ints.pop(0)
        assert low <= value <= high, f"scripted {value} outside {low}..{high}"
        return value

    def chance(self, probability: float) -> bool:
        self.chance_calls.append(probability)
        if not self.chances:
            return False
        return self.chances.pop(0)

    def random_float(self) -> float:
        if not self.floats:
            return super().random_float()
        return self.floats.pop(0)


@pytest.fixture
def rng() -> GameRNG:
    return GameRNG(seed=42)


@pytest.fixture
def make_rng():
    """Factory for :class:`ScriptedRNG` instances."""
    return ScriptedRNG
