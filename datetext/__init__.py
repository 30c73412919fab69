"""Date arithmetic, word-oriented string helpers and simple record types."""

__version__ = "0.1.0"
__all__ = ["address", "dates", "people", "period", "textops"]