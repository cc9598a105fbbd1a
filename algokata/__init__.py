"""Solutions to classic coding exercises on numbers, strings, arrays and linked lists."""

__version__ = "0.1.0"
__all__ = ["arrays", "linked_lists", "numbers", "strings"]