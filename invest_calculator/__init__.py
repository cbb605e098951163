"""Investment growth and position profit/loss calculator."""

__version__ = "0.1.0"
