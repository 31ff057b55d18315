"""CLI command for running War simulations."""

from __future__ import annotations

import logging

import click

from warsim.analysis.win_rate import summarize
from warsim.simulation.runner import BACKENDS, SimulationConfig, simulate, split_games

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--games",
    type=int,
    default=10000,
    envvar="WARSIM_GAMES",
    show_default=True,
    help="Number of games to play",
)
@click.option(
    "--procs",
    type=click.IntRange(min=1),
    default=4,
    envvar="WARSIM_PROCS",
    show_default=True,
    help="Number of concurrent workers",
)
@click.option("--seed", type=int, default=None, help="Seed for worker seeds (default: clock)")
@click.option(
    "--backend",
    type=click.Choice(BACKENDS),
    default="process",
    show_default=True,
    help="Run workers in processes or threads",
)
@click.option("--confidence", is_flag=True, help="Also print a 95% confidence interval")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    games: int,
    procs: int,
    seed: int | None,
    backend: str,
    confidence: bool,
    verbose: bool,
):
    """Estimate how often the sorting player wins at War."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    config = SimulationConfig(games=games, procs=procs, seed=seed, backend=backend)

    click.echo(f"Playing {split_games(games, procs)} games each on {procs} cores.")
    report = simulate(config)

    click.echo(
        f"Smart player wins: {report.wins} games out of {report.total_games} "
        f"({report.win_percentage:0.2f}%)"
    )

    if confidence:
        summary = summarize(report)
        click.echo(
            f"95% confidence interval: "
            f"{summary.ci_low * 100:0.2f}% - {summary.ci_high * 100:0.2f}%"
        )
        if not summary.workers_consistent:
            logger.warning(
                f"Worker win rates differ more than expected "
                f"(p={summary.homogeneity_pvalue:.4f})"
            )


if __name__ == "__main__":
    main()
