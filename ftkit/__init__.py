"""C-style character, memory, string and line-reading helpers with a compact printf-style formatter."""

__version__ = "0.1.0"