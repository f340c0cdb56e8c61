"""goalcast: savings goal projection and Monte Carlo risk simulation."""

__version__ = "0.1.0"
