"""A non-binary tree in a bounded table, with traversals, queries and a console menu."""

__version__ = "0.1.0"
__all__ = ["tree", "menu"]