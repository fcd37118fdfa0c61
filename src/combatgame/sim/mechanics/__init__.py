"""Combat mechanics: species special abilities and player actions.

Usage::

    from combatgame.sim.mechanics import (
        apply_special_ability, SPECIAL_ABILITIES,
        swing_weapon, drink_potion,
    )
"""

# -- abilities ---------------------------------------------------------------
from .abilities import SPECIAL_ABILITIES, apply_special_ability

# -- player actions ----------------------------------------------------------
from .actions import drink_potion, swing_weapon

__all__ = [
    # abilities
    "SPECIAL_ABILITIES",
    "apply_special_ability",
    # player actions
    "swing_weapon",
    "drink_potion",
]
