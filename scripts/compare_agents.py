"""Compare RandomAgent vs HeuristicAgent over many full game runs.

Usage:
    python scripts/compare_agents.py [--runs N] [--parallel] [--config balance.json]
"""

from __future__ import annotations

import argparse
import logging
import time

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from combatgame.config import GameConfig, load_config
from combatgame.ir.species import Species
from combatgame.sim.play_agents.heuristic_agent import HeuristicAgent
from combatgame.sim.play_agents.random_agent import RandomAgent
from combatgame.sim.runner import BatchRunner


def run_comparison(n_runs: int = 500, parallel: bool = False, config: GameConfig | None = None) -> None:
    results = {}
    for label, agent_class in [("RandomAgent", RandomAgent), ("HeuristicAgent", HeuristicAgent)]:
        print(f"\nRunning {n_runs} games with {label}...")
        runner = BatchRunner(agent_class=agent_class, config=config)
        t0 = time.time()
        telemetry = runner.run_batch(n_runs=n_runs, base_seed=0, parallel=parallel)
        elapsed = time.time() - t0

        wins = sum(1 for r in telemetry if r.final_result == "win")
        battles = [r.battles_fought for r in telemetry]
        battles_won = [r.battles_won for r in telemetry]
        final_gold = [r.final_gold for r in telemetry]

        # Loss rate per species across every battle fought
        fought = {s.value: 0 for s in Species}
        lost = {s.value: 0 for s in Species}
        for r in telemetry:
            for b in r.battles:
                fought[b.species] += 1
                if b.result == "loss":
                    lost[b.species] += 1

        results[label] = {
            "wins": wins,
            "win_rate": wins / n_runs * 100,
            "battles": battles,
            "battles_won": battles_won,
            "final_gold": final_gold,
            "fought": fought,
            "lost": lost,
            "elapsed": elapsed,
        }

        print(f"  Time: {elapsed:.1f}s ({elapsed/n_runs*1000:.0f}ms/run)")
        print(f"  Win rate: {wins}/{n_runs} ({wins/n_runs*100:.1f}%)")
        print(f"  Avg battles: {np.mean(battles):.1f} (median {np.median(battles):.0f})")
        print(f"  Avg battles won: {np.mean(battles_won):.1f}")
        print(f"  Avg final gold: {np.mean(final_gold):.1f}")

    generate_charts(results, n_runs)


def generate_charts(results: dict, n_runs: int) -> None:
    fig, axes = plt.subplots(2, 2, figsize=(14, 10))
    fig.suptitle(f"RandomAgent vs HeuristicAgent - {n_runs} Games", fontsize=16, fontweight="bold")

    colors = {"RandomAgent": "#e74c3c", "HeuristicAgent": "#2ecc71"}
    labels = list(results.keys())

    # --- Chart 1: Win Rate ---
    ax = axes[0, 0]
    win_rates = [results[l]["win_rate"] for l in labels]
    bars = ax.bar(labels, win_rates, color=[colors[l] for l in labels], edgecolor="black", linewidth=0.5)
    for bar, rate, r in zip(bars, win_rates, [results[l] for l in labels]):
        ax.text(bar.get_x() + bar.get_width()/2, bar.get_height() + 0.5,
                f'{rate:.1f}%\n({r["wins"]}/{n_runs})',
                ha='center', va='bottom', fontsize=11, fontweight='bold')
    ax.set_ylabel("Win Rate (%)")
    ax.set_title("Dragon Slain")
    ax.set_ylim(0, max(win_rates) * 1.4 + 5)

    # --- Chart 2: Battles Won Distribution ---
    ax = axes[0, 1]
    max_bw = max(max(results[l]["battles_won"]) for l in labels)
    bins = np.arange(-0.5, max_bw + 1.5, 1)
    for label in labels:
        bw = results[label]["battles_won"]
        ax.hist(bw, bins=bins, alpha=0.6, label=f'{label} (avg={np.mean(bw):.1f})',
                color=colors[label], edgecolor="black", linewidth=0.3)
    ax.set_xlabel("Battles Won Per Game")
    ax.set_ylabel("Count")
    ax.set_title("Battles Won Distribution")
    ax.legend()

    # --- Chart 3: Loss Rate by Species ---
    ax = axes[1, 0]
    species = [s.value for s in Species]
    x = np.arange(len(species))
    width = 0.38
    for i, label in enumerate(labels):
        fought = results[label]["fought"]
        lost = results[label]["lost"]
        rates = [lost[s] / fought[s] * 100 if fought[s] else 0.0 for s in species]
        ax.bar(x + (i - 0.5) * width, rates, width, label=label,
               color=colors[label], edgecolor="black", linewidth=0.5)
    ax.set_xticks(x)
    ax.set_xticklabels([s.title() for s in species])
    ax.set_ylabel("Battles Lost (%)")
    ax.set_title("Loss Rate by Enemy Species")
    ax.legend()

    # --- Chart 4: Summary Table ---
    ax = axes[1, 1]
    ax.axis("off")
    row_labels = [
        "Win Rate",
        "Avg Battles",
        "Median Battles",
        "Max Battles",
        "Avg Battles Won",
        "Avg Final Gold",
        "Time (s)",
    ]
    table_data = []
    for metric in row_labels:
        row = []
        for label in labels:
            r = results[label]
            if metric == "Win Rate":
                row.append(f'{r["win_rate"]:.1f}%')
            elif metric == "Avg Battles":
                row.append(f'{np.mean(r["battles"]):.1f}')
            elif metric == "Median Battles":
                row.append(f'{np.median(r["battles"]):.0f}')
            elif metric == "Max Battles":
                row.append(f'{max(r["battles"])}')
            elif metric == "Avg Battles Won":
                row.append(f'{np.mean(r["battles_won"]):.1f}')
            elif metric == "Avg Final Gold":
                row.append(f'{np.mean(r["final_gold"]):.1f}')
            elif metric == "Time (s)":
                row.append(f'{r["elapsed"]:.1f}')
        table_data.append(row)

    table = ax.table(
        cellText=table_data,
        rowLabels=row_labels,
        colLabels=labels,
        cellLoc="center",
        loc="center",
    )
    table.auto_set_font_size(False)
    table.set_fontsize(11)
    table.scale(1.0, 1.6)

    for j, label in enumerate(labels):
        table[0, j].set_facecolor(colors[label])
        table[0, j].set_text_props(color="white", fontweight="bold")

    plt.tight_layout()
    out_path = "agent_comparison.png"
    plt.savefig(out_path, dpi=150, bbox_inches="tight")
    print(f"\nChart saved to {out_path}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--runs", type=int, default=500, help="Number of games per agent")
    parser.add_argument("--parallel", action="store_true", help="Run games in worker processes")
    parser.add_argument("--config", help="JSON file with GameConfig overrides")
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING)
    config = load_config(args.config) if args.config else None
    run_comparison(args.runs, parallel=args.parallel, config=config)
