"""Marketing budget pricing and lifecycle engine."""

__version__ = "0.6.0"
