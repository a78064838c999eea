"""Plain-Python solutions to classic algorithm problems, grouped by technique."""

__version__ = "0.1.0"