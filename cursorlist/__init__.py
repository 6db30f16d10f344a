"""A doubly linked list with a movable cursor, a demo and a scored check suite."""

__version__ = "0.1.0"
__all__ = ["cursor_list", "demo", "grader"]