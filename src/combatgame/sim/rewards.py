"""Battle outcome handling -- rewards on victory, termination on defeat.

- Player lost: the game ends; the enemy is awarded nothing.
- Enemy lost: the player takes the enemy's gold and heals by half their
  current health (rounded up, capped at max).  Beating the rare boss
  completes the game.
- Stalemate (turn cap reached): nothing changes hands.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel

from combatgame.ir.species import RARE_BOSS, Species

if TYPE_CHECKING:
    from combatgame.sim.core.entities import Character, Enemy, Player

logger = logging.getLogger(__name__)

VICTORY_HEAL_RATIO = 0.5


class BattleResult(str, Enum):
    """Result of a battle from the player's point of view."""

    WIN = "win"
    LOSS = "loss"
    STALEMATE = "stalemate"


class BattleOutcome(BaseModel):
    """Everything the caller needs to know once a battle is over."""

    result: BattleResult
    enemy_name: str
    enemy_species: Species
    loser_name: str | None = None
    end_game: bool = False
    """True when the player died."""

    game_completed: bool = False
    """True when the rare boss was defeated."""

    gold_awarded: int = 0
    health_restored: int = 0
    final_gold: int
    final_health: int
    turns: int = 0

    @property
    def should_end(self) -> bool:
        return self.end_game or self.game_completed


def victory_heal_amount(health: int, ratio: float = VICTORY_HEAL_RATIO) -> int:
    """Healing granted after a win: ``ceil(health * ratio)``."""
    return math.ceil(health * ratio)


def resolve_outcome(
    player: Player,
    enemy: Enemy,
    loser: Character | None,
    heal_ratio: float = VICTORY_HEAL_RATIO,
    turns: int = 0,
) -> BattleOutcome:
    """Apply the consequences of a finished battle to *player*.

    Parameters
    ----------
    player, enemy:
        The two combatants.
    loser:
        The character that died, or ``None`` for a stalemate.
    heal_ratio:
        Fraction of the player's current health restored on a win.
    turns:
        Number of rounds fought, recorded on the outcome.
    """
    if loser is player:
        logger.info("%s was defeated by %s", player.name, enemy.name)
        return BattleOutcome(
            result=BattleResult.LOSS,
            enemy_name=enemy.name,
            enemy_species=enemy.species,
            loser_name=player.name,
            end_game=True,
            final_gold=player.gold,
            final_health=player.health,
            turns=turns,
        )

    if loser is None:
        logger.warning(
            "Battle between %s and %s ended without a loser after %d turns",
            player.name, enemy.name, turns,
        )
        return BattleOutcome(
            result=BattleResult.STALEMATE,
            enemy_name=enemy.name,
            enemy_species=enemy.species,
            final_gold=player.gold,
            final_health=player.health,
            turns=turns,
        )

    gold = enemy.gold
    player.modify_gold(gold)

    health_before = player.health
    player.modify_health(victory_heal_amount(player.health, heal_ratio))
    restored = player.health - health_before

    completed = enemy.species == RARE_BOSS
    logger.info(
        "%s defeated %s: +%dG, +%dHP%s",
        player.name, enemy.name, gold, restored,
        " (game completed)" if completed else "",
    )
    return BattleOutcome(
        result=BattleResult.WIN,
        enemy_name=enemy.name,
        enemy_species=enemy.species,
        loser_name=enemy.name,
        game_completed=completed,
        gold_awarded=gold,
        health_restored=restored,
        final_gold=player.gold,
        final_health=player.health,
        turns=turns,
    )
