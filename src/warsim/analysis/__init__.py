"""Statistics over finished simulation runs."""

from warsim.analysis.win_rate import WinRateSummary, summarize, win_rate_interval

__all__ = [
    "WinRateSummary",
    "summarize",
    "win_rate_interval",
]
