"""A minimal printf-style formatter with character, byte and string helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "search", "output", "strings", "printf"]