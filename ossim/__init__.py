"""Simulators for CPU scheduling and page replacement algorithms, with a command line."""

__version__ = "0.1.0"
__all__ = ["scheduling", "paging", "cli"]