"""Dynamic memory partitioning simulators."""

__version__ = "0.1.0"