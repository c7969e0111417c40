"""SQLite-backed user accounts with a profile log and stored profile images."""

__version__ = "0.1.0"
__all__ = ["__version__"]