"""Classic algorithms and data structures in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "disjoint_set",
    "dynamic",
    "geometry",
    "graphs",
    "hanoi",
    "heap",
    "numbers",
    "rmq",
    "strings",
    "treap",
    "tsp",
]