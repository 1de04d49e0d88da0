"""Solutions to classic coding-interview riddles on strings, matrices, lists, stacks and more."""

__version__ = "0.1.0"

__all__ = [
    "calculator",
    "edit_distance",
    "linked",
    "lists",
    "matrices",
    "operator_maximizer",
    "reverse_list",
    "rumor",
    "shelter",
    "social",
    "stack_sort",
    "stacks",
    "strings",
    "water_divide",
]