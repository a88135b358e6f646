"""Classic data structures and algorithms: sorting, arrays, a min-stack, graphs, linked lists and trees."""

__version__ = "0.1.0"
__all__ = ["arrays", "graphs", "linked_list", "min_stack", "sorting", "trees"]