"""Classic algorithm solutions and small data structures: searches, stacks, sets and greedy methods."""

__version__ = "0.1.0"