"""Monte Carlo simulator for the card game War."""

__version__ = "0.1.0"
