"""Confidence and consistency checks for a simulated win rate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from scipy import stats

from warsim.simulation.runner import SimulationReport


@dataclass
class WinRateSummary:
    """Player 2's win rate with its uncertainty."""
    win_rate: float                  # 0.0-1.0 over all games played
    ci_low: float
    ci_high: float
    confidence: float
    worker_rates: np.ndarray         # Win rate of each worker
    homogeneity_pvalue: Optional[float]  # None when the test is undefined

    @property
    def workers_consistent(self) -> bool:
        """False if workers disagree more than chance allows (p < 0.05)."""
        return self.homogeneity_pvalue is None or self.homogeneity_pvalue >= 0.05


def win_rate_interval(
    wins: int,
    games: int,
    confidence: float = 0.95,
) -> Tuple[float, float]:
    """Wilson score interval for a binomial win rate.

    Args:
        wins: Games won
        games: Games played
        confidence: Confidence level of the interval

    Returns:
        (low, high) bounds; (0.0, 1.0) when no games were played
    """
    if games == 0:
        return 0.0, 1.0
    ci = stats.binomtest(wins, games).proportion_ci(
        confidence_level=confidence, method='wilson'
    )
    return float(ci.low), float(ci.high)


def _homogeneity_pvalue(report: SimulationReport) -> Optional[float]:
    """Chi-square test that every worker sampled the same win rate."""
    if report.workers < 2 or report.games_per_worker == 0:
        return None
    if report.wins == 0 or report.wins == report.total_games:
        # A row of zeros has no expected frequencies to test against
        return None
    wins = np.asarray(report.worker_wins)
    table = np.vstack([wins, report.games_per_worker - wins])
    result = stats.chi2_contingency(table)
    return float(result[1])


def summarize(report: SimulationReport, confidence: float = 0.95) -> WinRateSummary:
    """Summarize a finished run.

    Args:
        report: Result of ``simulate``
        confidence: Confidence level for the interval

    Returns:
        WinRateSummary for player 2
    """
    total = report.total_games
    win_rate = report.wins / total if total else 0.0
    ci_low, ci_high = win_rate_interval(report.wins, total, confidence)

    if report.games_per_worker:
        worker_rates = np.asarray(report.worker_wins, dtype=float) / report.games_per_worker
    else:
        worker_rates = np.zeros(len(report.worker_wins))

    return WinRateSummary(
        win_rate=win_rate,
        ci_low=ci_low,
        ci_high=ci_high,
        confidence=confidence,
        worker_rates=worker_rates,
        homogeneity_pvalue=_homogeneity_pvalue(report),
    )
