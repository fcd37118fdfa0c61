"""Telemetry data models for per-battle and per-run statistics.

These lightweight dataclasses capture what is needed to judge game balance
without storing every turn:

- **BattleTelemetry**: opponent, outcome, turn count, health and damage.
- **RunTelemetry**: seed, ordered list of battles, final outcome.

Both classes are plain ``dataclass`` instances (not Pydantic models) to
keep collection cheap during batch runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class BattleTelemetry:
    """Stats from a single battle.

    Attributes
    ----------
    species:
        Species value of the enemy fought.
    result:
        ``"win"``, ``"loss"`` or ``"stalemate"``.
    turns:
        Number of rounds fought.
    player_hp_start:
        Player health when the battle started.
    player_hp_end:
        Player health when the battle ended, before any victory healing.
    damage_dealt:
        Health removed from the enemy.
    damage_taken:
        Health removed from the player.
    gold_awarded:
        Gold received for the win (0 otherwise).
    """

    species: str
    result: str
    turns: int
    player_hp_start: int
    player_hp_end: int
    damage_dealt: int = 0
    damage_taken: int = 0
    gold_awarded: int = 0


@dataclass
class RunTelemetry:
    """Stats from one game session.

    Attributes
    ----------
    seed:
        The master RNG seed used for this run.
    battles:
        Ordered list of battle telemetry, one per battle.
    final_result:
        ``"win"`` if the rare boss was defeated, ``"loss"`` if the player
        died, ``"abandoned"`` if the battle cap was reached first.
    final_gold:
        Player gold when the run ended.
    """

    seed: int
    battles: list[BattleTelemetry] = field(default_factory=list)
    final_result: str = "loss"
    final_gold: int = 0

    @property
    def battles_won(self) -> int:
        return sum(1 for b in self.battles if b.result == "win")

    @property
    def battles_fought(self) -> int:
        return len(self.battles)
