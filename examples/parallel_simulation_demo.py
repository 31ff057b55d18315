#!/usr/bin/env python3
"""Demonstration of a parallel War simulation with statistics.

Runs the same seeded simulation on an increasing number of workers and
prints the win rate of the sorting player with its confidence interval.

Usage:
    python examples/parallel_simulation_demo.py
"""

import time

from warsim.analysis.win_rate import summarize
from warsim.simulation.runner import SimulationConfig, simulate


def demonstrate_worker_scaling():
    """Compare run time and results across worker counts."""
    print("=== Parallel War Simulation Demo ===\n")

    num_games = 20000
    for procs in (1, 2, 4):
        config = SimulationConfig(games=num_games, procs=procs, seed=2024)
        start_time = time.time()
        report = simulate(config)
        elapsed = time.time() - start_time

        summary = summarize(report)
        print(f"{procs} worker(s): {report.wins}/{report.total_games} wins "
              f"({report.win_percentage:.2f}%), "
              f"CI {summary.ci_low:.3f}-{summary.ci_high:.3f}, {elapsed:.2f}s")
        if summary.homogeneity_pvalue is not None:
            print(f"  worker homogeneity p-value: {summary.homogeneity_pvalue:.3f}")


if __name__ == "__main__":
    demonstrate_worker_scaling()
