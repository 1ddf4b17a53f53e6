"""Dining philosophers simulation with one thread per philosopher and a monitor."""

__version__ = "0.1.0"