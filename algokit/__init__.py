"""Classic algorithms: numbers, arrays, linked structures, graphs, recursion and puzzles."""

__version__ = "0.1.0"
__all__ = ["numbers", "arrays", "structures", "graphs", "recursion", "puzzles"]