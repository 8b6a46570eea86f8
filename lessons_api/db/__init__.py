"""Database helpers (MongoDB client export)."""

from .mongo import connect

__all__ = ["connect"]
