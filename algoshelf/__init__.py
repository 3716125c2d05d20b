"""Classic algorithms and data structures: graphs, sorting, heaps, lists, tries,
number theory, dynamic programming, strings, postfix evaluation and backtracking."""

__version__ = "0.1.0"