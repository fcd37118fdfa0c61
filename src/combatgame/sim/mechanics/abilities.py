"""Species special abilities.

Each ability post-processes an attack that has just been rolled, before the
summary line is appended.  Abilities are selected by dispatching on the
enemy's :class:`~combatgame.ir.species.Species` tag; the trigger chance
comes from the species definition.

| Species | Effect when triggered |
|---------|-----------------------|
| Slime   | damage forced to 0 |
| Goblin  | +3 damage |
| Ogre    | one more full attack, merged into this one |
| Dragon  | 25/35: damage doubled; 10/35: heals itself by 10 |
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from combatgame.ir.species import Species

if TYPE_CHECKING:
    from combatgame.sim.core.entities import Attack, Enemy
    from combatgame.sim.core.rng import GameRNG

AbilityFn = Callable[["Enemy", "Attack", "GameRNG"], "Attack"]

GOBLIN_BONUS_DAMAGE = 3
DRAGON_DOUBLE_CHANCE = 0.25
DRAGON_HEAL = 10


def _slime_slip(enemy: Enemy, attack: Attack, rng: GameRNG) -> Attack:
    attack.damage = 0
    attack.add_to_description(f"{enemy.name} slipped and their attack failed.")
    return attack


def _goblin_swing(enemy: Enemy, attack: Attack, rng: GameRNG) -> Attack:
    attack.damage += GOBLIN_BONUS_DAMAGE
    attack.add_to_description(
        f"{enemy.name} swung harder, gaining {GOBLIN_BONUS_DAMAGE}DP"
    )
    return attack


def _ogre_attack_again(enemy: Enemy, attack: Attack, rng: GameRNG) -> Attack:
    attack.add_to_description(f"{enemy.name} attacks again!")
    attack.merge(enemy.attack(rng))
    return attack


def _dragon_fury(enemy: Enemy, attack: Attack, rng: GameRNG) -> Attack:
    # Conditional on the ability having triggered at 0.35 overall
    if rng.chance(DRAGON_DOUBLE_CHANCE / enemy.definition.ability_chance):
        attack.damage *= 2
        attack.add_to_description(f"{enemy.name}'s attack doubled.")
    else:
        enemy.modify_health(DRAGON_HEAL)
        attack.add_to_description(f"{enemy.name} recovered {DRAGON_HEAL}HP.")
    return attack


SPECIAL_ABILITIES: dict[Species, AbilityFn] = {
    Species.SLIME: _slime_slip,
    Species.GOBLIN: _goblin_swing,
    Species.OGRE: _ogre_attack_again,
    Species.DRAGON: _dragon_fury,
}


def apply_special_ability(enemy: Enemy, attack: Attack, rng: GameRNG) -> Attack:
    """Roll the species trigger chance and, on success, apply its ability."""
    if not rng.chance(enemy.definition.ability_chance):
        return attack
    return SPECIAL_ABILITIES[enemy.species](enemy, attack, rng)
