"""Multi-source evaluation consensus engine."""

__version__ = "0.1.0"
