"""
Entries Domain

Journal entries with attachments, as read by the listing endpoint.
"""

from .entities import Attachment, Entry
from .repositories import EntryRepository

__all__ = ["Attachment", "Entry", "EntryRepository"]
