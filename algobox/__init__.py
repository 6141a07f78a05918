"""Classic algorithms, data structures and three small contest solvers."""

__version__ = "0.1.0"