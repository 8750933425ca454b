"""
Infrastructure Layer

Concrete adapters for Redis persistence and event handling.
"""

from .redis_entry_repository import RedisEntryRepository
from .redis_repository import RedisConnectionManager, RedisRepository

__all__ = ["RedisConnectionManager", "RedisEntryRepository", "RedisRepository"]
