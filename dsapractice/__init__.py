"""Data-structure and algorithm exercises: patterns, array helpers, searches, linked lists and a stack."""

__version__ = "0.1.0"
__all__ = ["arrays", "circular", "linked_list", "patterns", "search", "stack"]