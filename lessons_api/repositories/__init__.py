"""
Persistence adapters.

Services depend on the ``Repository`` interface; the concrete backend
(MongoDB or in-memory) is chosen once at startup.
"""

from .base import Repository
from .memory_repository import MemoryRepository
from .mongo_repository import MongoRepository

__all__ = ["Repository", "MemoryRepository", "MongoRepository"]
