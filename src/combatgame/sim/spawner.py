"""Enemy generator -- weighted species selection with per-spawn decay.

The generator keeps one weight per species (tier order).  Every spawn picks
a species with :meth:`GameRNG.weighted_pick`, then decays the table: each
regular species' weight drops by a fixed step (never below the floor) and
the rare boss receives whatever probability remains, so the table always
sums to 1 and the boss becomes steadily more likely.

With the defaults the weights go::

    [0.50, 0.30, 0.20, 0.00] -> [0.45, 0.25, 0.15, 0.15] -> ...
    -> [0.05, 0.05, 0.05, 0.85]
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Sequence

from combatgame.ir.species import RARE_BOSS, Species
from combatgame.sim.core.entities import Enemy

if TYPE_CHECKING:
    from combatgame.config import GameConfig
    from combatgame.sim.core.rng import GameRNG

logger = logging.getLogger(__name__)

SPECIES_ORDER: tuple[Species, ...] = (
    Species.SLIME,
    Species.GOBLIN,
    Species.OGRE,
    Species.DRAGON,
)

INITIAL_WEIGHTS: tuple[float, ...] = (0.50, 0.30, 0.20, 0.00)
DECAY_STEP = 0.05
WEIGHT_FLOOR = 0.05


class EnemyGenerator:
    """Spawns enemies and drifts the species distribution toward the boss.

    Parameters
    ----------
    rng:
        Shared RNG used for species selection.
    weights:
        Initial weights in :data:`SPECIES_ORDER`; must sum to 1.
    decay_step:
        Amount subtracted from each regular species' weight per spawn.
    floor:
        Lowest weight the decay step may reduce a regular species to.
    """

    def __init__(
        self,
        rng: GameRNG,
        weights: Sequence[float] = INITIAL_WEIGHTS,
        decay_step: float = DECAY_STEP,
        floor: float = WEIGHT_FLOOR,
    ) -> None:
        if len(weights) != len(SPECIES_ORDER):
            raise ValueError(
                f"Expected {len(SPECIES_ORDER)} weights, got {len(weights)}"
            )
        if not math.isclose(sum(weights), 1.0, abs_tol=1e-9):
            raise ValueError(f"Spawn weights must sum to 1.0, got {sum(weights)}")
        self._rng = rng
        self._weights = list(weights)
        self._decay_step = decay_step
        self._floor = floor
        self.spawn_count = 0

    @classmethod
    def from_config(cls, config: GameConfig, rng: GameRNG) -> EnemyGenerator:
        return cls(
            rng,
            weights=config.spawn_weights,
            decay_step=config.spawn_decay_step,
            floor=config.spawn_weight_floor,
        )

    # -- queries -------------------------------------------------------------

    @property
    def weights(self) -> tuple[float, ...]:
        return tuple(self._weights)

    def probability_of(self, species: Species) -> float:
        return self._weights[SPECIES_ORDER.index(species)]

    # -- spawning ------------------------------------------------------------

    def pick_species(self) -> Species:
        return SPECIES_ORDER[self._rng.weighted_pick(self._weights)]

    def spawn(self) -> Enemy:
        """Pick a species, build a fresh enemy of it, then decay the weights."""
        species = self.pick_species()
        enemy = Enemy(species=species)
        self.spawn_count += 1
        self.decay()
        logger.debug(
            "Spawn #%d: %s (next weights %s)",
            self.spawn_count, species.value, self._weights,
        )
        return enemy

    def decay(self) -> None:
        """Shrink every regular species' weight and hand the rest to the boss.

        Weights already at or below the floor are left untouched, so the
        step can never push a weight negative.
        """
        boss_idx = SPECIES_ORDER.index(RARE_BOSS)
        regular = [i for i in range(len(SPECIES_ORDER)) if i != boss_idx]

        for idx in regular:
            weight = self._weights[idx]
            if weight > self._floor:
                self._weights[idx] = max(weight - self._decay_step, self._floor)

        self._weights[boss_idx] = max(
            0.0, 1.0 - sum(self._weights[i] for i in regular),
        )
