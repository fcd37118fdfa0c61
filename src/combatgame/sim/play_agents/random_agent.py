"""Random agent -- swings most of the time, occasionally drinks a potion.

The ``RandomAgent`` is the baseline for batch runs: it never shops and
never reasons about the enemy, so it gives a lower bound on how far a
fresh character gets with starter equipment alone.

Behaviour:
    - With probability ``potion_chance`` (and only if it holds one) it
      drinks a random potion from the inventory.
    - Otherwise it swings the equipped weapon.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from combatgame.sim.core.rng import GameRNG
from combatgame.sim.mechanics.actions import drink_potion, swing_weapon
from combatgame.sim.play_agents.base import PlayAgent

if TYPE_CHECKING:
    from combatgame.sim.core.entities import Attack, Player


class RandomAgent(PlayAgent):
    """Agent that picks its action at random.

    Parameters
    ----------
    rng:
        Seeded RNG for deterministic randomness.  If ``None``, a default
        ``GameRNG(seed=0)`` is created.
    potion_chance:
        Probability (0.0 -- 1.0) of drinking a potion instead of swinging.
        Default is 0.10 (10 %).
    """

    def __init__(
        self,
        rng: GameRNG | None = None,
        potion_chance: float = 0.10,
    ) -> None:
        self._rng = rng or GameRNG(seed=0)
        self._potion_chance = potion_chance

    def choose_attack(self, player: Player) -> Attack:
        potions = player.inventory.potions()
        if potions and self._rng.chance(self._potion_chance):
            return drink_potion(player, self._rng.random_choice(potions), self._rng)
        return swing_weapon(player, self._rng)
