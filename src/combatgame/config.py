"""Game configuration -- validated tunables for a session.

Every value has a default matching the standard game, so ``GameConfig()``
is a complete configuration.  Overrides can be loaded from a JSON file::

    config = load_config("balance.json")
"""

from __future__ import annotations

import math
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from combatgame.sim.core.entities import PLAYER_MAX_HEALTH, PLAYER_STARTING_GOLD
from combatgame.sim.core.inventory import DEFAULT_SLOTS

DEFAULT_SPAWN_WEIGHTS: tuple[float, float, float, float] = (0.50, 0.30, 0.20, 0.00)


class GameConfig(BaseModel):
    """Tunables for one game session."""

    player_name: str = "Player"
    player_max_health: int = Field(default=PLAYER_MAX_HEALTH, gt=0)
    starting_gold: int = Field(default=PLAYER_STARTING_GOLD, ge=0)
    inventory_slots: int = Field(default=DEFAULT_SLOTS, ge=0)

    spawn_weights: list[float] = Field(default_factory=lambda: list(DEFAULT_SPAWN_WEIGHTS))
    """Initial spawn probability per species, in tier order."""

    spawn_decay_step: float = Field(default=0.05, ge=0.0, le=1.0)
    spawn_weight_floor: float = Field(default=0.05, ge=0.0, le=1.0)

    victory_heal_ratio: float = Field(default=0.5, ge=0.0)
    """Fraction of current health restored after a win (rounded up)."""

    sell_rate: float = Field(default=0.5, ge=0.0, le=1.0)
    max_turns: int = Field(default=1000, gt=0)
    """Rounds after which a battle is called a stalemate."""

    max_battles: int = Field(default=200, gt=0)
    """Battles after which a simulated run is abandoned."""

    seed: int = 0

    @field_validator("spawn_weights")
    @classmethod
    def _validate_spawn_weights(cls, v: list[float]) -> list[float]:
        if len(v) != 4:
            raise ValueError(f"spawn_weights needs one weight per species (4), got {len(v)}")
        if any(w < 0 for w in v):
            raise ValueError("spawn_weights must be >= 0")
        if not math.isclose(sum(v), 1.0, abs_tol=1e-9):
            raise ValueError(f"spawn_weights must sum to 1.0, got {sum(v)}")
        return v


def load_config(path: str | Path) -> GameConfig:
    """Load a :class:`GameConfig` from a JSON file.

    Raises
    ------
    pydantic.ValidationError
        If the file content does not describe a valid configuration.
    """
    return GameConfig.model_validate_json(Path(path).read_text())
