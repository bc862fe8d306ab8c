"""Classic graph, tree, number-theory and stack algorithms."""

__version__ = "0.1.0"