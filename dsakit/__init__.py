"""Classic sorting, searching, array, number, stack and linked-list algorithms."""

__version__ = "0.1.0"
__all__ = ["arrays", "linked_list", "numbers", "searching", "sorting", "stack"]