"""Parallel Monte Carlo runner for War.

Each worker owns its random source, deck, hands and game object and plays
its whole share of games without touching shared state. The orchestrator
draws two 64-bit seeds per worker from the seed source before launch, so the
seed source is the only thing read on behalf of more than one worker.

Two backends are available:
    1. process: a 'spawn' multiprocessing pool, one process per worker.
       This is the one that actually uses several cores.
    2. thread: a ThreadPoolExecutor. Games are pure Python so the GIL
       serialises them, but nothing has to be pickled or spawned.
"""

from __future__ import annotations

import logging
import multiprocessing as mp
import random
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Tuple

from warsim.simulation.cards import build_deck, shuffle
from warsim.simulation.hand import Hand
from warsim.simulation.war import WarGame

logger = logging.getLogger(__name__)

_mp_context = mp.get_context('spawn')

BACKENDS = ("process", "thread")
HALF_DECK = 26

SeedPair = Tuple[int, int]


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""

    games: int = 10000  # Total games requested; remainder after division is dropped
    procs: int = 4  # Number of parallel workers
    seed: Optional[int] = None  # None = seed source seeded from the clock
    backend: str = "process"


@dataclass(frozen=True)
class SimulationReport:
    """Outcome of a run: how many games each worker played and won."""

    games_per_worker: int
    workers: int
    worker_wins: Tuple[int, ...]

    @property
    def total_games(self) -> int:
        return self.games_per_worker * self.workers

    @property
    def wins(self) -> int:
        return sum(self.worker_wins)

    @property
    def win_percentage(self) -> float:
        if self.total_games == 0:
            return 0.0
        return self.wins * 100 / self.total_games


@dataclass
class _WorkerTask:
    """Everything a worker needs; must stay picklable for 'spawn'."""
    games: int
    seed_pair: SeedPair


def make_seed_source(seed: Optional[int] = None) -> random.Random:
    """Create the run-wide generator that hands out worker seeds.

    Args:
        seed: Explicit seed; defaults to the current time in seconds
    """
    if seed is None:
        seed = int(time.time())
    return random.Random(seed)


def draw_seed_pair(seed_source: random.Random) -> SeedPair:
    """Draw the two 64-bit values that seed one worker."""
    return seed_source.getrandbits(64), seed_source.getrandbits(64)


def make_random_source(seed_pair: SeedPair) -> random.Random:
    """Build a worker's private generator from its seed pair."""
    high, low = seed_pair
    return random.Random((high << 64) | low)


def split_games(total_games: int, worker_count: int) -> int:
    """Games per worker. Truncates; the remainder is not played."""
    return total_games // worker_count


def run_worker(games_to_play: int, seed_pair: SeedPair) -> int:
    """Play ``games_to_play`` games and count player 2's wins.

    The deck, both hands and the game object are created once and reused
    for every game.

    Args:
        games_to_play: Number of games for this worker
        seed_pair: Two 64-bit seeds for the worker's random source

    Returns:
        Number of games won by player 2
    """
    rng = make_random_source(seed_pair)
    deck = build_deck()
    halves = memoryview(deck)
    player1, player2 = Hand(), Hand()
    game = WarGame(player1, player2, rng)

    wins = 0
    for _ in range(games_to_play):
        shuffle(deck, rng)
        player1.reset(halves[:HALF_DECK])
        player2.reset(halves[HALF_DECK:])
        wins += game.play()
    return wins


def _run_worker_task(task: _WorkerTask) -> int:
    """Pool entry point (top-level so 'spawn' can pickle it)."""
    return run_worker(task.games, task.seed_pair)


def _run_tasks(tasks: List[_WorkerTask], backend: str) -> List[int]:
    """Run one worker per task and block until all have returned."""
    if backend == "process":
        with _mp_context.Pool(processes=len(tasks)) as pool:
            return pool.map(_run_worker_task, tasks)
    with ThreadPoolExecutor(max_workers=len(tasks)) as executor:
        return list(executor.map(_run_worker_task, tasks))


def _fan_out(
    games_per_worker: int,
    worker_count: int,
    seed_source: random.Random,
    backend: str,
) -> List[int]:
    if backend not in BACKENDS:
        raise ValueError(f"Unknown backend {backend!r}, expected one of {BACKENDS}")
    tasks = [
        _WorkerTask(games_per_worker, draw_seed_pair(seed_source))
        for _ in range(worker_count)
    ]
    if not tasks:
        return []
    results = _run_tasks(tasks, backend)
    # Spawned workers have no logging configured, so report from here
    for task, wins in zip(tasks, results):
        logger.debug(f"Worker seeded {task.seed_pair} won {wins}/{task.games}")
    return results


def run_all(
    total_games: int,
    worker_count: int,
    seed_source: Optional[random.Random] = None,
    backend: str = "process",
) -> int:
    """Split ``total_games`` across workers and sum their wins.

    Args:
        total_games: Games requested; only ``total_games // worker_count``
            per worker are played
        worker_count: Number of concurrent workers
        seed_source: Generator for worker seeds (default: clock seeded)
        backend: "process" or "thread"

    Returns:
        Total games won by player 2 across all workers
    """
    if seed_source is None:
        seed_source = make_seed_source()
    games_per_worker = split_games(total_games, worker_count)
    return sum(_fan_out(games_per_worker, worker_count, seed_source, backend))


def simulate(config: SimulationConfig) -> SimulationReport:
    """Run a full simulation described by ``config``.

    Returns:
        SimulationReport with per-worker win counts
    """
    games_per_worker = split_games(config.games, config.procs)
    seed_source = make_seed_source(config.seed)

    logger.info(
        f"Simulating {games_per_worker * config.procs} games on "
        f"{config.procs} {config.backend} workers"
    )
    start_time = time.time()
    worker_wins = _fan_out(games_per_worker, config.procs, seed_source, config.backend)
    elapsed = time.time() - start_time

    report = SimulationReport(
        games_per_worker=games_per_worker,
        workers=config.procs,
        worker_wins=tuple(worker_wins),
    )
    logger.info(f"Finished {report.total_games} games in {elapsed:.2f}s")
    return report
