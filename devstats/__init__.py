"""Weekly developer statistics for a Discord webhook."""

__version__ = "0.1.0"
