"""Character models for the turn-based combat engine.

All models use Pydantic v2 BaseModel for validation.  Listener lists and
turn-cycle state are private attributes: they belong to a live battle and
are never serialised.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, PrivateAttr, model_validator

from combatgame.ir.enchantments import Enchantment
from combatgame.ir.items import AnyItem, Armour, Weapon
from combatgame.ir.species import Species, SpeciesDefinition, get_species
from combatgame.sim.core.events import CharacterEvent, CharacterObserver, CombatantState
from combatgame.sim.core.inventory import Inventory

if TYPE_CHECKING:
    from combatgame.sim.core.rng import GameRNG

logger = logging.getLogger(__name__)

PLAYER_MAX_HEALTH = 30
PLAYER_STARTING_GOLD = 100


# ---------------------------------------------------------------------------
# Attack / Defence (value objects)
# ---------------------------------------------------------------------------

class Attack(BaseModel):
    """Damage produced by one attack, plus the narration that goes with it."""

    damage: int = Field(default=0, ge=0)
    description: list[str] = Field(default_factory=list)

    def add_to_description(self, line: str) -> None:
        self.description.append(line)

    def merge(self, other: Attack) -> None:
        """Fold a follow-up attack into this one: damage adds, lines append."""
        self.damage += other.damage
        self.description.extend(other.description)

    @property
    def text(self) -> str:
        return "\n".join(self.description)


class Defence(BaseModel):
    """Result of defending against one attack."""

    damage: int = Field(ge=0)
    """Incoming damage before defence."""

    defence: int = Field(ge=0)
    """Defence rolled by the defender."""

    damage_taken: int = Field(ge=0)
    """``max(0, damage - defence)``; the health actually lost."""

    description: list[str] = Field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join(self.description)


# ---------------------------------------------------------------------------
# Character base
# ---------------------------------------------------------------------------

class Character(BaseModel, ABC):
    """Common base for the player and enemies.

    Health is always kept within ``0..max_health``.  The first time it
    reaches 0 the character dies: every observer gets ``on_death`` exactly
    once and further health changes are ignored.
    """

    name: str
    max_health: int = Field(gt=0)
    health: int | None = None
    """Defaults to ``max_health``."""

    gold: int = 0

    _observers: list[CharacterObserver] = PrivateAttr(default_factory=list)
    _phase: CombatantState = PrivateAttr(default=CombatantState.IDLE)
    _death_fired: bool = PrivateAttr(default=False)

    @model_validator(mode="after")
    def _init_health(self) -> Character:
        if self.health is None:
            self.health = self.max_health
        if not 0 <= self.health <= self.max_health:
            raise ValueError(
                f"health must be within 0..{self.max_health}, got {self.health}"
            )
        return self

    # -- stat ranges ---------------------------------------------------------

    @property
    @abstractmethod
    def min_attack(self) -> int: ...

    @property
    @abstractmethod
    def max_attack(self) -> int: ...

    @property
    @abstractmethod
    def min_defence(self) -> int: ...

    @property
    @abstractmethod
    def max_defence(self) -> int: ...

    # -- state ---------------------------------------------------------------

    @property
    def is_dead(self) -> bool:
        return self.health == 0

    @property
    def state(self) -> CombatantState:
        if self.is_dead:
            return CombatantState.DEAD
        return self._phase

    # -- observers -----------------------------------------------------------

    def add_observer(self, observer: CharacterObserver) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: CharacterObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def _notify(self, event: CharacterEvent) -> None:
        # Snapshot: listeners may detach themselves while handling the event
        for observer in list(self._observers):
            observer.notify(event, self)

    # -- health --------------------------------------------------------------

    def modify_health(self, amount: int) -> None:
        """Add *amount* (negative for damage) and clamp to ``0..max_health``."""
        if self.is_dead:
            logger.debug("Ignoring health change of %d for dead %s", amount, self.name)
            return

        self.health = max(0, min(self.max_health, self.health + amount))
        if self.health == 0:
            self._die()

    def _die(self) -> None:
        if self._death_fired:
            return
        self._death_fired = True
        logger.debug("%s died", self.name)
        self._notify(CharacterEvent.DEATH)

    # -- combat --------------------------------------------------------------

    @abstractmethod
    def attack(self, rng: GameRNG) -> Attack:
        """Produce this half-turn's attack."""

    def defend(self, damage: int, rng: GameRNG) -> Defence:
        """Roll defence against *damage* and lose whatever gets through."""
        self._phase = CombatantState.DEFENDING
        try:
            defence = rng.random_int(self.min_defence, self.max_defence)
            damage_taken = max(0, damage - defence)
            self.modify_health(-damage_taken)
        finally:
            self._phase = CombatantState.IDLE

        return Defence(
            damage=damage,
            defence=defence,
            damage_taken=damage_taken,
            description=[
                f"{self.name} deflected {defence}DP.",
                f"{self.name} lost {damage_taken}HP.",
            ],
        )


# ---------------------------------------------------------------------------
# Enemy
# ---------------------------------------------------------------------------

class Enemy(Character):
    """An enemy whose stats come from its species constants.

    ``name``, ``max_health`` and ``gold`` default to the species values.
    """

    species: Species

    @model_validator(mode="before")
    @classmethod
    def _fill_species_defaults(cls, data: Any) -> Any:
        if isinstance(data, dict) and "species" in data:
            definition = get_species(Species(data["species"]))
            data = dict(data)
            data.setdefault("name", definition.name)
            data.setdefault("max_health", definition.max_health)
            data.setdefault("gold", definition.gold_reward)
        return data

    @property
    def definition(self) -> SpeciesDefinition:
        return get_species(self.species)

    @property
    def min_attack(self) -> int:
        return self.definition.min_attack

    @property
    def max_attack(self) -> int:
        return self.definition.max_attack

    @property
    def min_defence(self) -> int:
        return self.definition.min_defence

    @property
    def max_defence(self) -> int:
        return self.definition.max_defence

    def attack(self, rng: GameRNG) -> Attack:
        """Roll damage, run the species special ability, then summarise."""
        from combatgame.sim.mechanics.abilities import apply_special_ability

        # An ogre's extra attack re-enters here; only the outermost call resets
        outermost = self._phase is not CombatantState.ATTACKING
        self._phase = CombatantState.ATTACKING
        self._notify(CharacterEvent.ATTACK)

        damage = rng.random_int(self.min_attack, self.max_attack)
        attack = Attack(damage=damage, description=[f"{self.name} attacks!"])
        attack = apply_special_ability(self, attack, rng)
        attack.add_to_description(f"{self.name} attacked, dealing {attack.damage}DP.")

        if outermost:
            self._phase = CombatantState.IDLE
        return attack


# ---------------------------------------------------------------------------
# Player
# ---------------------------------------------------------------------------

def _default_weapon() -> Weapon:
    return Weapon(
        name="Default Sword", cost=0, min_damage=0, max_damage=0,
        damage_type="Useless", weapon_type="Sword",
    )


def _default_armour() -> Armour:
    return Armour(
        name="Default Armour", cost=0, min_defence=0, max_defence=0,
        material="Scraps",
    )


class Player(Character):
    """The player character.

    Attack and defence ranges come from the equipped weapon and armour.
    The player does not pick its own attacks: :meth:`attack` raises an
    ATTACK event and returns whatever the attached controller supplied via
    :meth:`set_next_attack`.
    """

    name: str = "Player"
    max_health: int = Field(default=PLAYER_MAX_HEALTH, gt=0)
    gold: int = PLAYER_STARTING_GOLD
    inventory: Inventory = Field(default_factory=Inventory)
    weapon: Weapon = Field(default_factory=_default_weapon)
    armour: Armour = Field(default_factory=_default_armour)

    _next_attack: Attack | None = PrivateAttr(default=None)

    # -- stat ranges ---------------------------------------------------------

    @property
    def min_attack(self) -> int:
        return self.weapon.min_effect

    @property
    def max_attack(self) -> int:
        return self.weapon.max_effect

    @property
    def min_defence(self) -> int:
        return self.armour.min_defence

    @property
    def max_defence(self) -> int:
        return self.armour.max_defence

    # -- combat --------------------------------------------------------------

    def set_next_attack(self, attack: Attack) -> None:
        self._next_attack = attack

    def attack(self, rng: GameRNG) -> Attack:
        """Ask the attached controller for an attack and return it.

        Raises
        ------
        RuntimeError
            If no listener supplied an attack while handling the event.
        """
        self._phase = CombatantState.ATTACKING
        self._next_attack = None
        try:
            self._notify(CharacterEvent.ATTACK)
            attack = self._next_attack
        finally:
            self._next_attack = None
            self._phase = CombatantState.IDLE

        if attack is None:
            raise RuntimeError(
                f"No attack was chosen for {self.name}; attach a PlayerController"
            )
        return attack

    # -- gold & items --------------------------------------------------------

    def modify_gold(self, amount: int) -> None:
        self.gold += amount

    def give_item(self, item: AnyItem) -> bool:
        return self.inventory.add(item)

    def take_item(self, item: AnyItem) -> bool:
        return self.inventory.remove(item)

    @property
    def has_inventory_space(self) -> bool:
        return not self.inventory.is_full

    # -- equipment -----------------------------------------------------------

    def equip_weapon(self, weapon: Weapon) -> None:
        self.weapon = weapon

    def equip_armour(self, armour: Armour) -> None:
        self.armour = armour

    def enchant_weapon(self, enchantment: Enchantment) -> Weapon:
        """Apply *enchantment* to the equipped weapon.

        The enchantment and the old weapon leave the inventory; the
        enchanted weapon takes the old weapon's slot and is equipped.
        """
        enchanted = self.weapon.enchant(enchantment)
        self.inventory.remove(enchantment)
        self.inventory.remove(self.weapon)
        self.inventory.add(enchanted)
        self.equip_weapon(enchanted)
        return enchanted
