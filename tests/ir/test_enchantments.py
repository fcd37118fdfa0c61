"""Tests for enchantments and the weapon enchantment chain."""

import pytest
from pydantic import ValidationError

from combatgame.ir.enchantments import (
    Enchantment,
    EnchantmentKind,
    TransformFamily,
    all_enchantments,
    make_enchantment,
)
from combatgame.ir.items import Weapon


@pytest.fixture
def sword() -> Weapon:
    return Weapon(
        name="Short Sword", cost=10, min_damage=5, max_damage=10,
        damage_type="Slashing", weapon_type="Sword",
    )


# ---------------------------------------------------------------------------
# Enchantment table
# ---------------------------------------------------------------------------

class TestEnchantmentTable:
    @pytest.mark.parametrize(
        "kind, cost",
        [
            (EnchantmentKind.DAMAGE_II, 10),
            (EnchantmentKind.DAMAGE_V, 5),
            (EnchantmentKind.FIRE_DAMAGE, 20),
            (EnchantmentKind.POWER, 10),
        ],
    )
    def test_costs(self, kind, cost):
        assert make_enchantment(kind).cost == cost

    def test_all_enchantments_one_of_each(self):
        kinds = [e.enchantment_kind for e in all_enchantments()]
        assert kinds == list(EnchantmentKind)

    def test_fresh_instances(self):
        assert make_enchantment(EnchantmentKind.POWER).id != make_enchantment(EnchantmentKind.POWER).id

    def test_band_bounds_validated(self):
        with pytest.raises(ValidationError):
            Enchantment(
                name="Broken", cost=1, enchantment_kind=EnchantmentKind.FIRE_DAMAGE,
                family=TransformFamily.BAND, bonus_min=10, bonus_max=5,
            )


# ---------------------------------------------------------------------------
# Single transforms
# ---------------------------------------------------------------------------

class TestTransforms:
    def test_flat_bonus(self, sword, make_rng):
        enchanted = sword.enchant(make_enchantment(EnchantmentKind.DAMAGE_II))
        assert (enchanted.min_effect, enchanted.max_effect) == (10, 15)
        assert enchanted.roll_damage(make_rng(ints=[7])) == 12

    def test_fire_damage_band(self, sword, make_rng):
        enchanted = sword.enchant(make_enchantment(EnchantmentKind.FIRE_DAMAGE))
        assert (enchanted.min_effect, enchanted.max_effect) == (10, 20)

        rng = make_rng(ints=[7, 8])
        assert enchanted.roll_damage(rng) == 15
        assert rng.int_calls == [(5, 10), (5, 10)]

    def test_fire_damage_samples_every_roll(self, sword, make_rng):
        enchanted = sword.enchant(make_enchantment(EnchantmentKind.FIRE_DAMAGE))
        rng = make_rng(ints=[5, 5, 5, 10])
        assert enchanted.roll_damage(rng) == 10
        assert enchanted.roll_damage(rng) == 15

    def test_power_rounds_half_up(self, sword, make_rng):
        enchanted = sword.enchant(make_enchantment(EnchantmentKind.POWER))
        # 5 * 1.1 = 5.5 -> 6, 10 * 1.1 = 11
        assert (enchanted.min_effect, enchanted.max_effect) == (6, 11)
        assert enchanted.roll_damage(make_rng(ints=[5])) == 6


# ---------------------------------------------------------------------------
# Chains
# ---------------------------------------------------------------------------

class TestEnchantmentChain:
    def test_two_flat_bonuses_stack(self, sword):
        enchanted = (
            sword.enchant(make_enchantment(EnchantmentKind.DAMAGE_V))
            .enchant(make_enchantment(EnchantmentKind.DAMAGE_V))
        )
        assert enchanted.min_effect == 15
        assert enchanted.max_effect == 20

    def test_total_cost_sums_chain(self, sword):
        enchanted = (
            sword.enchant(make_enchantment(EnchantmentKind.FIRE_DAMAGE))
            .enchant(make_enchantment(EnchantmentKind.POWER))
        )
        assert sword.cost == 10
        assert enchanted.total_cost == 40

    def test_chain_order_matters(self, sword):
        power_first = (
            sword.enchant(make_enchantment(EnchantmentKind.POWER))
            .enchant(make_enchantment(EnchantmentKind.DAMAGE_V))
        )
        power_last = (
            sword.enchant(make_enchantment(EnchantmentKind.DAMAGE_V))
            .enchant(make_enchantment(EnchantmentKind.POWER))
        )
        # max: round(10 * 1.1) + 5 = 16  vs  round(15 * 1.1) = 17
        assert power_first.max_effect == 16
        assert power_last.max_effect == 17

    def test_roll_folds_through_chain(self, sword, make_rng):
        enchanted = (
            sword.enchant(make_enchantment(EnchantmentKind.DAMAGE_V))
            .enchant(make_enchantment(EnchantmentKind.POWER))
        )
        # (7 + 5) * 1.1 = 13.2 -> 13
        assert enchanted.roll_damage(make_rng(ints=[7])) == 13

    def test_rolls_stay_within_reported_range(self, sword, rng):
        enchanted = (
            sword.enchant(make_enchantment(EnchantmentKind.FIRE_DAMAGE))
            .enchant(make_enchantment(EnchantmentKind.POWER))
            .enchant(make_enchantment(EnchantmentKind.DAMAGE_II))
        )
        for _ in range(500):
            assert enchanted.min_effect <= enchanted.roll_damage(rng) <= enchanted.max_effect

    def test_enchant_leaves_base_weapon_untouched(self, sword):
        enchanted = sword.enchant(make_enchantment(EnchantmentKind.DAMAGE_V))
        assert sword.enchantments == []
        assert sword.min_effect == 5
        assert enchanted.id != sword.id
        assert enchanted.is_enchanted
