"""
Redis Entry Repository

Stores journal entries as JSON documents with a created-at sorted index
for newest-first paging.
"""

import logging
import uuid
from typing import List, Optional

from elogbook.domain.entries import Entry, EntryRepository

from .redis_repository import RedisRepository

logger = logging.getLogger(__name__)


class RedisEntryRepository(EntryRepository):
    """
    Redis-based implementation of EntryRepository.

    Keys:
    - entry:<id>     -> entry document (JSON)
    - entries:index  -> sorted set of ids scored by created_at timestamp
    """

    def __init__(self, redis_repository: RedisRepository):
        """
        Initialize with Redis repository.

        Args:
            redis_repository: RedisRepository instance from infrastructure layer
        """
        self.redis_repo = redis_repository
        self.entry_prefix = "entry"
        self.index_key = "entries:index"

    def save(self, entry: Entry) -> Optional[str]:
        if entry.id is None:
            entry.id = uuid.uuid4().hex

        if not self.redis_repo.set_json(f"{self.entry_prefix}:{entry.id}", entry.to_dict()):
            return None

        if not self.redis_repo.add_to_index(
            self.index_key, entry.id, entry.created_at.timestamp()
        ):
            return None

        return entry.id

    def get(self, entry_id: str) -> Optional[Entry]:
        data = self.redis_repo.get_json(f"{self.entry_prefix}:{entry_id}")
        if data is None:
            return None

        try:
            return Entry.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Error deserializing entry {entry_id}: {e}")
            return None

    def get_page(self, limit: int, offset: int = 0) -> List[Entry]:
        if limit <= 0:
            return []

        ids = self.redis_repo.range_index_desc(self.index_key, offset, offset + limit - 1)
        entries = []
        for entry_id in ids:
            entry = self.get(entry_id)
            # Index may briefly outlive a deleted document
            if entry is not None:
                entries.append(entry)
        return entries
