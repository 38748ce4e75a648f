"""Classic algorithm exercises on lists, strings, arrays, matrices, trees and graphs."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "graphs",
    "linked_lists",
    "matrix",
    "nodes",
    "strings",
    "structures",
    "trees",
]