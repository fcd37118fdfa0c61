"""Shared fixtures and helpers for simulation tests."""

from __future__ import annotations

import pytest

from combatgame.ir.items import Armour, Potion, PotionType, Weapon
from combatgame.sim.core.entities import Attack, Player
from combatgame.sim.play_agents.base import PlayAgent


class FixedAgent(PlayAgent):
    """Agent that always returns a copy of the same attack."""

    def __init__(self, damage: int = 0) -> None:
        self.damage = damage
        self.calls = 0

    def choose_attack(self, player: Player) -> Attack:
        self.calls += 1
        return Attack(
            damage=self.damage,
            description=[f"{player.name} attacked, dealing {self.damage}DP."],
        )


@pytest.fixture
def sword() -> Weapon:
    return Weapon(
        name="Short Sword", cost=10, min_damage=5, max_damage=10,
        damage_type="Slashing", weapon_type="Sword",
    )


@pytest.fixture
def leather() -> Armour:
    return Armour(name="Leather Jerkin", cost=30, min_defence=3, max_defence=6, material="Leather")


@pytest.fixture
def healing_potion() -> Potion:
    return Potion(name="Healing Potion", cost=25, min_value=10, max_value=20, potion_type=PotionType.HEALING)


@pytest.fixture
def fire_flask() -> Potion:
    return Potion(name="Fire Flask", cost=20, min_value=8, max_value=15, potion_type=PotionType.DAMAGE)


@pytest.fixture
def player() -> Player:
    """A fresh player with the default (0-0) equipment."""
    return Player()


@pytest.fixture
def armed_player(sword: Weapon, leather: Armour) -> Player:
    p = Player()
    p.give_item(sword)
    p.equip_weapon(sword)
    p.give_item(leather)
    p.equip_armour(leather)
    return p


@pytest.fixture
def fixed_agent():
    """Factory for :class:`FixedAgent` instances."""
    return FixedAgent
