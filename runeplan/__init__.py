"""Goal planner for Old School RuneScape accounts."""

__version__ = "0.1.0"