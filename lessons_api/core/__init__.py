"""
Core utilities shared across the lessons API.

This package hosts configuration helpers, logging setup, the error taxonomy
and password hashing. Routers and services depend on these primitives instead
of reading os.environ or touching storage directly.
"""
