"""Info fields, formatting helpers and ANSI styling for summarising a Git repository."""

__version__ = "0.1.0"