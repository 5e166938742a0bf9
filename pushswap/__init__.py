"""Two-stack integer sorting puzzle solver that reports each move."""

__version__ = "0.1.0"