"""Lessons storefront backend (FastAPI + MongoDB with in-memory fallback)."""

__version__ = "1.0.0"
