"""
Entry Entities

Journal entries and the attachments stored alongside them.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..download_auth.value_objects import DownloadDescriptor


@dataclass
class Attachment:
    """
    A file attached to an entry.

    saved_path is the hashed on-disk location and must never be sent to
    clients; they get a download URL instead.
    """
    id: int
    saved_path: str
    original_name: str
    mime: str

    def to_descriptor(self) -> DownloadDescriptor:
        return DownloadDescriptor(file_path=self.saved_path, original_name=self.original_name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "saved_path": self.saved_path,
            "original_name": self.original_name,
            "mime": self.mime,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Attachment':
        return cls(
            id=int(data["id"]),
            saved_path=data["saved_path"],
            original_name=data["original_name"],
            mime=data.get("mime", "application/octet-stream"),
        )


@dataclass
class Entry:
    """Entity representing one journal entry."""
    content: str
    created_at: datetime
    attachments: List[Attachment] = field(default_factory=list)
    id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for persistence."""
        return {
            "id": self.id,
            "content": self.content,
            "created_at": self.created_at.isoformat(),
            "attachments": [a.to_dict() for a in self.attachments],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Entry':
        """Create Entry from dictionary."""
        return cls(
            id=data.get("id"),
            content=data.get("content", ""),
            created_at=datetime.fromisoformat(data["created_at"]),
            attachments=[Attachment.from_dict(a) for a in data.get("attachments") or []],
        )
