"""Play one game headlessly and print the battle log.

Usage:
    python scripts/demo_battle.py [--seed N] [--agent random|heuristic] [--battles N] [-v]
"""

from __future__ import annotations

import argparse
import logging

from combatgame.config import GameConfig, load_config
from combatgame.sim.core.rng import GameRNG
from combatgame.sim.display import TextView
from combatgame.sim.play_agents.heuristic_agent import HeuristicAgent
from combatgame.sim.play_agents.random_agent import RandomAgent
from combatgame.sim.runner import GameSession

AGENTS = {"random": RandomAgent, "heuristic": HeuristicAgent}


def separator(title):
    print(f"\n{'='*60}")
    print(f"  {title}")
    print(f"{'='*60}")


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--agent", choices=sorted(AGENTS), default="heuristic")
    parser.add_argument("--battles", type=int, default=None, help="Stop after this many battles")
    parser.add_argument("--config", help="JSON file with GameConfig overrides")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = load_config(args.config) if args.config else GameConfig()
    updates: dict = {"seed": args.seed}
    if args.battles is not None:
        updates["max_battles"] = args.battles
    config = config.model_copy(update=updates)

    agent = AGENTS[args.agent](rng=GameRNG(args.seed).fork("agent"))
    session = GameSession(config=config, agent=agent, view=TextView())

    separator(f"{args.agent} agent, seed {args.seed}")
    telemetry = session.run()

    separator("Summary")
    print(f"Result: {telemetry.final_result}")
    print(f"Battles: {telemetry.battles_fought} fought, {telemetry.battles_won} won")
    print(f"Final gold: {telemetry.final_gold}")
    print(f"Weapon: {session.player.weapon.description}")
    print(f"Armour: {session.player.armour.description}")
    for i, b in enumerate(telemetry.battles, 1):
        print(
            f"  {i:3d}. {b.species:<7} {b.result:<9} {b.turns:4d} turns  "
            f"HP {b.player_hp_start:3d} -> {b.player_hp_end:3d}  +{b.gold_awarded}G"
        )


if __name__ == "__main__":
    main()
