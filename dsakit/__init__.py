"""Classic data structures and algorithms: sorting, searching, hashing, graphs, trees, linked lists and backtracking."""

__version__ = "0.1.0"