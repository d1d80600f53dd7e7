"""Classic algorithms and data structures: arithmetic, primality, bits, backtracking, greedy methods, sorting and simple containers."""

__version__ = "0.1.0"