"""Classic sorting, text search, graph, dynamic-programming and data-structure algorithms."""

__version__ = "0.1.0"

__all__ = ["dynamic", "graphs", "puzzles", "sorting", "structures", "text_search"]