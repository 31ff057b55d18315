"""Tests for win-rate statistics."""

import numpy as np
import pytest

from warsim.analysis.win_rate import summarize, win_rate_interval
from warsim.simulation.runner import SimulationReport


def test_interval_contains_observed_rate() -> None:
    """Test the interval brackets the observed proportion."""
    low, high = win_rate_interval(50, 100)
    assert 0.0 <= low < 0.5 < high <= 1.0


def test_interval_narrows_with_more_games() -> None:
    """Test more games give a tighter interval."""
    low_small, high_small = win_rate_interval(50, 100)
    low_big, high_big = win_rate_interval(5000, 10000)
    assert (high_big - low_big) < (high_small - low_small)


def test_interval_without_games() -> None:
    """Test no games means no information."""
    assert win_rate_interval(0, 0) == (0.0, 1.0)


def test_summarize_report() -> None:
    """Test summary of a two-worker run."""
    report = SimulationReport(games_per_worker=100, workers=2, worker_wins=(40, 60))
    summary = summarize(report)

    assert summary.win_rate == pytest.approx(0.5)
    assert summary.ci_low < 0.5 < summary.ci_high
    assert summary.confidence == 0.95
    np.testing.assert_allclose(summary.worker_rates, [0.4, 0.6])
    assert summary.homogeneity_pvalue is not None
    assert 0.0 < summary.homogeneity_pvalue < 1.0


def test_summarize_flags_inconsistent_workers() -> None:
    """Test wildly different workers fail the homogeneity check."""
    report = SimulationReport(games_per_worker=1000, workers=2, worker_wins=(100, 900))
    summary = summarize(report)
    assert summary.homogeneity_pvalue < 0.05
    assert not summary.workers_consistent


def test_summarize_single_worker_has_no_homogeneity_test() -> None:
    """Test homogeneity is undefined for one worker."""
    report = SimulationReport(games_per_worker=100, workers=1, worker_wins=(55,))
    summary = summarize(report)
    assert summary.homogeneity_pvalue is None
    assert summary.workers_consistent


def test_summarize_all_wins() -> None:
    """Test a run where player 2 wins everything skips the chi-square test."""
    report = SimulationReport(games_per_worker=10, workers=2, worker_wins=(10, 10))
    summary = summarize(report)
    assert summary.win_rate == 1.0
    assert summary.homogeneity_pvalue is None


def test_summarize_empty_run() -> None:
    """Test a run that played nothing."""
    report = SimulationReport(games_per_worker=0, workers=4, worker_wins=(0, 0, 0, 0))
    summary = summarize(report)
    assert summary.win_rate == 0.0
    assert (summary.ci_low, summary.ci_high) == (0.0, 1.0)
    assert summary.worker_rates.shape == (4,)
    assert summary.homogeneity_pvalue is None
