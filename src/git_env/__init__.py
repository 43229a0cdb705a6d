"""Environment branch workflow helper for git."""

__version__ = "1.2.0"
