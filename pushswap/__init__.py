"""Two-stack sorting with a limited instruction set."""

__version__ = "1.0.0"