"""Compact solutions to classic algorithm exercises on numbers, strings, searches, arrays and linked lists."""

__version__ = "0.1.0"
__all__ = ["arrays", "linked_list", "numbers", "search", "strings"]