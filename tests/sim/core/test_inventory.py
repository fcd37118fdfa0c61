"""Tests for the bounded Inventory."""

from combatgame.ir.enchantments import EnchantmentKind, make_enchantment
from combatgame.sim.core.inventory import DEFAULT_SLOTS, Inventory


class TestInventory:
    def test_default_slots(self):
        assert Inventory().slots == DEFAULT_SLOTS == 15

    def test_add_until_full(self, healing_potion):
        inv = Inventory(slots=2)
        assert inv.add(healing_potion.clone())
        assert inv.add(healing_potion.clone())
        assert inv.is_full
        assert not inv.add(healing_potion.clone())
        assert len(inv) == 2
        assert inv.free_slots == 0

    def test_add_all_stops_at_capacity(self, healing_potion):
        inv = Inventory(slots=3)
        added = inv.add_all([healing_potion.clone() for _ in range(5)])
        assert added == 3
        assert len(inv) == 3

    def test_remove_by_id_leaves_other_copies(self, healing_potion):
        inv = Inventory()
        first, second = healing_potion.clone(), healing_potion.clone()
        inv.add_all([first, second])
        assert inv.remove(first)
        assert not inv.contains(first)
        assert inv.contains(second)

    def test_remove_missing_returns_false(self, healing_potion):
        assert not Inventory().remove(healing_potion)

    def test_typed_views(self, sword, leather, healing_potion):
        enchantment = make_enchantment(EnchantmentKind.POWER)
        inv = Inventory()
        inv.add_all([sword, leather, healing_potion, enchantment])
        assert inv.weapons() == [sword]
        assert inv.armour() == [leather]
        assert inv.potions() == [healing_potion]
        assert inv.enchantments() == [enchantment]
        assert inv.all_items() == [sword, leather, healing_potion, enchantment]

    def test_remove_at_and_clear(self, sword, leather):
        inv = Inventory()
        inv.add_all([sword, leather])
        assert inv.remove_at(0) is sword
        inv.clear()
        assert len(inv) == 0

    def test_validates_mixed_items(self):
        inv = Inventory.model_validate({
            "slots": 4,
            "items": [
                {"kind": "potion", "name": "Tonic", "cost": 5, "min_value": 1,
                 "max_value": 3, "potion_type": "HEALING"},
                {"kind": "enchantment", "name": "Damage V", "cost": 5,
                 "enchantment_kind": "DAMAGE_V", "family": "FLAT",
                 "bonus_min": 5, "bonus_max": 5},
            ],
        })
        assert len(inv.potions()) == 1
        assert len(inv.enchantments()) == 1
