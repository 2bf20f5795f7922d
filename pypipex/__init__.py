"""C-style character, number, string, linked-list and printf-formatting helpers."""

__version__ = "0.1.0"