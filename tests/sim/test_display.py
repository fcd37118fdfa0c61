"""Tests for the battle views."""

import io

import pytest

from combatgame.ir.species import Species
from combatgame.sim.core.entities import Attack, Defence, Enemy, Player
from combatgame.sim.display import NullView, TextView
from combatgame.sim.rewards import BattleOutcome, BattleResult
from combatgame.sim.runner import Battle


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()


def _outcome(**overrides) -> BattleOutcome:
    data = dict(
        result=BattleResult.WIN, enemy_name="Ogre", enemy_species=Species.OGRE,
        gold_awarded=40, health_restored=10, final_gold=140, final_health=30,
    )
    data.update(overrides)
    return BattleOutcome(**data)


class TestTextView:
    def test_attack_lines(self, out):
        TextView(out).on_attack_resolved(
            Attack(damage=4, description=["Slime attacks!", "Slime attacked, dealing 4DP."])
        )
        assert "Slime attacks!\nSlime attacked, dealing 4DP.\n" in out.getvalue()

    def test_defence_lines_indented(self, out):
        TextView(out).on_defence_resolved(Defence(
            damage=10, defence=6, damage_taken=4,
            description=["Goblin deflected 6DP.", "Goblin lost 4HP."],
        ))
        assert "  Goblin deflected 6DP.\n  Goblin lost 4HP.\n" in out.getvalue()

    def test_death(self, out):
        TextView(out).on_death(Enemy(species=Species.SLIME))
        assert "Slime has been slain." in out.getvalue()

    def test_battle_start(self, out):
        TextView(out).on_battle_start(Player(), Enemy(species=Species.SLIME))
        text = out.getvalue()
        assert "BATTLE" in text
        assert "Player (30/30 HP, 100G) vs Slime (10/10 HP)" in text
        assert "Weapon: Default Sword | Useless Sword | ATT: 0-0" in text

    def test_victory(self, out):
        TextView(out).on_battle_end(_outcome())
        text = out.getvalue()
        assert "Victory over the Ogre! +40G, +10HP (now 30HP, 140G)." in text
        assert "won the game" not in text

    def test_game_won(self, out):
        TextView(out).on_battle_end(_outcome(
            enemy_name="Dragon", enemy_species=Species.DRAGON, game_completed=True,
        ))
        assert "The Dragon is dead. You have won the game!" in out.getvalue()

    def test_game_over(self, out):
        TextView(out).on_battle_end(_outcome(
            result=BattleResult.LOSS, loser_name="Player", end_game=True,
            gold_awarded=0, health_restored=0, final_gold=100, final_health=0,
        ))
        assert "GAME OVER. Player fell with 100G to their name." in out.getvalue()

    def test_stalemate(self, out):
        TextView(out).on_battle_end(_outcome(
            result=BattleResult.STALEMATE, gold_awarded=0, health_restored=0, turns=1000,
        ))
        assert "wanders off after 1000 turns" in out.getvalue()

    def test_defaults_to_stdout(self, capsys):
        TextView().on_death(Player())
        assert "Player has been slain." in capsys.readouterr().out

    def test_full_battle_log(self, out, fixed_agent, make_rng):
        Battle(Player(), Enemy(species=Species.SLIME), make_rng(), fixed_agent(4), view=TextView(out)).run()
        text = out.getvalue()
        assert text.index("BATTLE") < text.index("Slime lost 4HP.")
        assert text.index("Slime has been slain.") < text.index("Victory over the Slime!")


class TestNullView:
    def test_ignores_everything(self):
        view = NullView()
        view.on_battle_start(Player(), Enemy(species=Species.SLIME))
        view.on_attack_resolved(Attack())
        view.on_death(Player())
        view.on_battle_end(_outcome())
