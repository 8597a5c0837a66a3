"""Browse tournaments, standings and match details from a SQLite sports results database."""

__version__ = "0.1.0"
__all__ = ["database", "presentation", "controller", "gui"]