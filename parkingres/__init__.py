"""Car and fine records for a car parking reservation system, kept in SQLite."""

__version__ = "0.1.0"
__all__ = ["car", "db", "fine"]