"""Battle simulation runner -- ties the turn engine, agents and telemetry together.

Provides three key classes:

- **Battle**: Runs one fight between the player and an enemy to completion.
- **GameSession**: Plays a whole game, battle after battle, with shop
  visits in between.
- **BatchRunner**: Orchestrates many sessions (optionally in parallel).
"""

from __future__ import annotations

import logging
import multiprocessing
from typing import Any, Sequence, TYPE_CHECKING

from combatgame.config import GameConfig
from combatgame.ir.items import AnyItem
from combatgame.sim.content.catalog import load_catalog, starter_items
from combatgame.sim.core.entities import Player
from combatgame.sim.core.events import CharacterObserver
from combatgame.sim.core.inventory import Inventory
from combatgame.sim.core.rng import GameRNG
from combatgame.sim.display import BattleView, NullView
from combatgame.sim.rewards import VICTORY_HEAL_RATIO, BattleOutcome, resolve_outcome
from combatgame.sim.shop import Shop
from combatgame.sim.spawner import EnemyGenerator

from combatgame.sim.play_agents.base import PlayAgent
from combatgame.sim.play_agents.controller import PlayerController
from combatgame.sim.play_agents.random_agent import RandomAgent
from combatgame.sim.telemetry import BattleTelemetry, RunTelemetry

if TYPE_CHECKING:
    from combatgame.sim.core.entities import Character, Enemy

logger = logging.getLogger(__name__)

_MAX_TURNS = 1000


# =====================================================================
# Battle
# =====================================================================

class _DeathWatcher(CharacterObserver):
    """Records the first character to die."""

    def __init__(self) -> None:
        self.loser: Character | None = None

    def on_death(self, character: Character) -> None:
        if self.loser is None:
            self.loser = character


class Battle:
    """A single fight between the player and one enemy.

    The player attacks first.  Each half-turn the attacker produces an
    :class:`Attack`; if it deals any damage the defender defends.  The
    fight stops as soon as either side dies, or after *max_turns* rounds
    (a stalemate).

    Parameters
    ----------
    player, enemy:
        The combatants.  Both must be alive.
    rng:
        Combat RNG used for enemy rolls and defence rolls.
    agent:
        Decides the player's attacks.
    view:
        Receives display notifications.  Defaults to :class:`NullView`.
    max_turns:
        Round cap after which the battle is called a stalemate.
    heal_ratio:
        Fraction of current health restored to the player on a win.
    """

    def __init__(
        self,
        player: Player,
        enemy: Enemy,
        rng: GameRNG,
        agent: PlayAgent,
        view: BattleView | None = None,
        max_turns: int = _MAX_TURNS,
        heal_ratio: float = VICTORY_HEAL_RATIO,
    ) -> None:
        if player.is_dead or enemy.is_dead:
            raise ValueError("Both combatants must be alive to start a battle")
        self.player = player
        self.enemy = enemy
        self.rng = rng
        self.agent = agent
        self.view = view or NullView()
        self.max_turns = max_turns
        self.heal_ratio = heal_ratio

        self.turns = 0
        self.damage_dealt = 0
        self.damage_taken = 0
        self._watcher = _DeathWatcher()
        self._controller = PlayerController(agent)

    @property
    def loser(self) -> Character | None:
        return self._watcher.loser

    @property
    def is_over(self) -> bool:
        return self.loser is not None

    def run(self) -> BattleOutcome:
        """Fight until one side dies (or the round cap), then resolve rewards."""
        self.player.add_observer(self._watcher)
        self.player.add_observer(self._controller)
        self.enemy.add_observer(self._watcher)
        try:
            self.view.on_battle_start(self.player, self.enemy)
            logger.debug("Battle start: %s vs %s", self.player.name, self.enemy.name)

            while not self.is_over and self.turns < self.max_turns:
                self.turns += 1
                self._half_turn(self.player, self.enemy)
                if not self.is_over:
                    self._half_turn(self.enemy, self.player)
        finally:
            self.player.remove_observer(self._watcher)
            self.player.remove_observer(self._controller)
            self.enemy.remove_observer(self._watcher)

        if self.loser is not None:
            self.view.on_death(self.loser)
        outcome = resolve_outcome(
            self.player, self.enemy, self.loser,
            heal_ratio=self.heal_ratio, turns=self.turns,
        )
        self.view.on_battle_end(outcome)
        return outcome

    def _half_turn(self, attacker: Character, defender: Character) -> None:
        attack = attacker.attack(self.rng)
        self.view.on_attack_resolved(attack)

        if attack.damage > 0:
            health_before = defender.health
            defence = defender.defend(attack.damage, self.rng)
            self.view.on_defence_resolved(defence)
            # Health actually lost; overkill is not counted
            lost = health_before - defender.health
            if defender is self.enemy:
                self.damage_dealt += lost
            else:
                self.damage_taken += lost

        logger.debug(
            "Turn %d: %s dealt %d (%s %d/%d HP)",
            self.turns, attacker.name, attack.damage,
            defender.name, defender.health, defender.max_health,
        )


# =====================================================================
# GameSession
# =====================================================================

class GameSession:
    """A full game: shop visit, battle, repeat until the game ends.

    The game ends when the player dies, when the rare boss is defeated, or
    when ``config.max_battles`` battles have been fought.

    Parameters
    ----------
    config:
        Session tunables.  Defaults to ``GameConfig()``.
    agent:
        Player agent.  Defaults to a :class:`RandomAgent` on a forked RNG.
    rng:
        Combat and spawn RNG.  Defaults to ``GameRNG(config.seed)``.
    items:
        Catalog items stocked in the shop.  Defaults to the bundled catalog.
    view:
        Display collaborator.  Defaults to :class:`NullView`.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        agent: PlayAgent | None = None,
        rng: GameRNG | None = None,
        items: Sequence[AnyItem] | None = None,
        view: BattleView | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rng = rng or GameRNG(self.config.seed)
        self.agent = agent or RandomAgent(rng=self.rng.fork("agent"))
        self.view = view or NullView()
        self.items = list(items) if items is not None else load_catalog()

        self.player = Player(
            name=self.config.player_name,
            max_health=self.config.player_max_health,
            gold=self.config.starting_gold,
            inventory=Inventory(slots=self.config.inventory_slots),
        )
        self.shop = Shop(sell_rate=self.config.sell_rate)
        self.shop.stock(self.items)
        self.spawner = EnemyGenerator.from_config(self.config, self.rng)
        self.telemetry = RunTelemetry(seed=self.rng.seed)

        self._equip_starter_items()

    def _equip_starter_items(self) -> None:
        weapon, armour = starter_items(self.items)
        weapon, armour = weapon.clone(), armour.clone()
        self.player.give_item(weapon)
        self.player.equip_weapon(weapon)
        self.player.give_item(armour)
        self.player.equip_armour(armour)

    def run_battle(self) -> BattleOutcome:
        """Spawn the next enemy and fight it."""
        enemy = self.spawner.spawn()
        hp_start = self.player.health

        battle = Battle(
            self.player, enemy, self.rng, self.agent,
            view=self.view,
            max_turns=self.config.max_turns,
            heal_ratio=self.config.victory_heal_ratio,
        )
        outcome = battle.run()

        self.telemetry.battles.append(BattleTelemetry(
            species=enemy.species.value,
            result=outcome.result.value,
            turns=outcome.turns,
            player_hp_start=hp_start,
            player_hp_end=outcome.final_health - outcome.health_restored,
            damage_dealt=battle.damage_dealt,
            damage_taken=battle.damage_taken,
            gold_awarded=outcome.gold_awarded,
        ))
        return outcome

    def run(self) -> RunTelemetry:
        """Play until the game ends and return the run's telemetry."""
        result = "abandoned"
        for _ in range(self.config.max_battles):
            self.agent.visit_shop(self.player, self.shop)
            outcome = self.run_battle()
            if outcome.end_game:
                result = "loss"
                break
            if outcome.game_completed:
                result = "win"
                break

        self.telemetry.final_result = result
        self.telemetry.final_gold = self.player.gold
        logger.info(
            "Run seed=%d finished: %s after %d battles (%d won, %dG)",
            self.telemetry.seed, result, self.telemetry.battles_fought,
            self.telemetry.battles_won, self.player.gold,
        )
        return self.telemetry


# =====================================================================
# BatchRunner
# =====================================================================

def _make_agent(agent_class: type[PlayAgent], seed: int) -> PlayAgent:
    agent_rng = GameRNG(seed).fork("agent")
    try:
        return agent_class(rng=agent_rng)  # type: ignore[call-arg]
    except TypeError:
        return agent_class()  # type: ignore[call-arg]


def _run_single_session(
    config: GameConfig,
    agent_class: type[PlayAgent],
    seed: int,
    items: Sequence[AnyItem],
) -> RunTelemetry:
    session_config = config.model_copy(update={"seed": seed})
    session = GameSession(
        config=session_config,
        agent=_make_agent(agent_class, seed),
        items=items,
    )
    return session.run()


def _worker_run_single(args: tuple) -> RunTelemetry:
    """Entry point for worker processes.  Reloads the catalog locally."""
    config_data, agent_class, seed, catalog_path = args
    config = GameConfig.model_validate(config_data)
    items = load_catalog(catalog_path)
    return _run_single_session(config, agent_class, seed, items)


class BatchRunner:
    """Runs many independent game sessions, optionally in parallel.

    Parameters
    ----------
    agent_class:
        Agent type instantiated once per session.  It is built with
        ``rng=`` when its constructor accepts one.
    config:
        Base configuration; each session overrides ``seed``.
    catalog_path:
        Catalog file to stock the shop from.  Defaults to the bundled one.
    """

    def __init__(
        self,
        agent_class: type[PlayAgent] = RandomAgent,
        config: GameConfig | None = None,
        catalog_path: str | None = None,
    ) -> None:
        self.agent_class = agent_class
        self.config = config or GameConfig()
        self.catalog_path = catalog_path
        self.items = load_catalog(catalog_path)

    def run_batch(
        self,
        n_runs: int,
        base_seed: int = 42,
        parallel: bool = False,
    ) -> list[RunTelemetry]:
        """Run *n_runs* sessions with seeds ``base_seed .. base_seed + n_runs - 1``."""
        seeds = [base_seed + i for i in range(n_runs)]

        if parallel and n_runs > 1:
            return self._run_parallel(seeds)
        return self._run_sequential(seeds)

    def _run_sequential(self, seeds: list[int]) -> list[RunTelemetry]:
        return [
            _run_single_session(self.config, self.agent_class, seed, self.items)
            for seed in seeds
        ]

    def _run_parallel(self, seeds: list[int]) -> list[RunTelemetry]:
        """Run sessions in worker processes.

        Workers receive the config as plain data and the catalog path, and
        rebuild both locally.
        """
        config_data: dict[str, Any] = self.config.model_dump()
        work_items = [
            (config_data, self.agent_class, seed, self.catalog_path)
            for seed in seeds
        ]

        n_workers = min(len(seeds), multiprocessing.cpu_count() or 1)

        with multiprocessing.Pool(processes=n_workers) as pool:
            results = pool.map(_worker_run_single, work_items)

        return results
