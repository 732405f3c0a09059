"""Classic algorithms on sequences, strings, linked lists, binary trees and graphs."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "backtracking",
    "graphs",
    "linked_lists",
    "strings",
    "structures",
    "trees",
]