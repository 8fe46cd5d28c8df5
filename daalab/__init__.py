"""Classic algorithms: array statistics, sorting, searching, knapsack, shortest paths and LCS."""

__version__ = "0.1.0"