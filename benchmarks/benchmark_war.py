"""Benchmark the War engine, single worker and across backends."""

import time

from warsim.simulation.runner import SimulationConfig, run_worker, simulate


def benchmark_single_worker(num_games: int = 2000) -> dict:
    """Benchmark one worker playing games back to back."""
    start_time = time.perf_counter()
    wins = run_worker(num_games, (1, 2))
    total_duration_s = time.perf_counter() - start_time

    return {
        "total_games": num_games,
        "total_duration_s": total_duration_s,
        "avg_ms_per_game": (total_duration_s * 1000) / num_games,
        "games_per_second": num_games / total_duration_s,
        "player2_wins": wins,
    }


def benchmark_backend(backend: str, num_games: int = 8000, procs: int = 4) -> dict:
    """Benchmark a full parallel run on the given backend."""
    config = SimulationConfig(games=num_games, procs=procs, seed=1, backend=backend)
    start_time = time.perf_counter()
    report = simulate(config)
    total_duration_s = time.perf_counter() - start_time

    return {
        "total_games": report.total_games,
        "total_duration_s": total_duration_s,
        "games_per_second": report.total_games / total_duration_s,
        "player2_wins": report.wins,
    }


def main():
    """Run War benchmarks."""
    print("=" * 60)
    print("WAR ENGINE BENCHMARK")
    print("=" * 60)
    print()

    # Warm-up run
    print("Warming up...")
    run_worker(50, (0, 0))
    print()

    single = benchmark_single_worker()
    print(f"Single worker: {single['games_per_second']:.0f} games/s "
          f"({single['avg_ms_per_game']:.3f} ms/game)")

    for backend in ("thread", "process"):
        results = benchmark_backend(backend)
        print(f"{backend:>7} backend: {results['games_per_second']:.0f} games/s "
              f"over {results['total_games']} games")


if __name__ == "__main__":
    main()
