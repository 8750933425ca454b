"""
Entry Repositories

Repository interface for journal entry persistence.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .entities import Entry


class EntryRepository(ABC):
    """Abstract repository interface for journal entries."""

    @abstractmethod
    def save(self, entry: Entry) -> Optional[str]:
        """
        Persist an entry, assigning an id if it has none.

        Args:
            entry: Entry to save

        Returns:
            The entry id if successful, None otherwise
        """
        pass

    @abstractmethod
    def get(self, entry_id: str) -> Optional[Entry]:
        """
        Retrieve an entry by id.

        Returns:
            Entry if found, None otherwise
        """
        pass

    @abstractmethod
    def get_page(self, limit: int, offset: int = 0) -> List[Entry]:
        """
        Retrieve a page of entries, newest first.

        Args:
            limit: Maximum number of entries
            offset: Number of newest entries to skip

        Returns:
            List of entries (may be empty)
        """
        pass
