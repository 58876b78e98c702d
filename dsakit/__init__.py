"""Classic algorithms and data structures: arrays, matrices, strings, searching, DP, recursion, stacks, disjoint sets and graphs."""

__version__ = "0.1.0"