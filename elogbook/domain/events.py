"""
Domain Events

Immutable records of significant state changes in the domain.
Events decouple side effects (logging) from core business logic.
"""

from abc import ABC
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class DomainEvent(ABC):
    """
    Base class for all domain events.

    Attributes:
        aggregate_id: ID of the aggregate that generated the event (the client id)
        occurred_at: Timestamp when the event occurred
    """
    aggregate_id: str
    occurred_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert event to dictionary for serialization.

        Returns:
            Dictionary representation of the event
        """
        return {
            "event_type": self.__class__.__name__,
            "aggregate_id": self.aggregate_id,
            "occurred_at": self.occurred_at.isoformat(),
        }


@dataclass(frozen=True)
class TokenIssuedEvent(DomainEvent):
    """
    Event emitted when a download token is issued.

    Attributes:
        token_prefix: First characters of the token, never the full value
        original_name: Presented filename of the attachment
        expires_at: Session deadline after issuance
    """
    token_prefix: str
    original_name: str
    expires_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update({
            "token_prefix": self.token_prefix,
            "original_name": self.original_name,
            "expires_at": self.expires_at.isoformat(),
        })
        return base_dict


@dataclass(frozen=True)
class TokenConsumedEvent(DomainEvent):
    """Event emitted when a token is exchanged for its file."""
    token_prefix: str
    original_name: str

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update({
            "token_prefix": self.token_prefix,
            "original_name": self.original_name,
        })
        return base_dict


@dataclass(frozen=True)
class DownloadRejectedEvent(DomainEvent):
    """
    Event emitted when a download attempt fails.

    Attributes:
        token_prefix: First characters of the presented token
        reason: Error category value (e.g. "expired_client")
    """
    token_prefix: str
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update({
            "token_prefix": self.token_prefix,
            "reason": self.reason,
        })
        return base_dict


@dataclass(frozen=True)
class SessionExtendedEvent(DomainEvent):
    """
    Event emitted when a client asks to keep its tokens alive.

    expires_at is None when the client id was unknown.
    """
    expires_at: Optional[datetime]

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update({
            "expires_at": self.expires_at.isoformat() if self.expires_at else None,
        })
        return base_dict


@dataclass(frozen=True)
class SessionsSweptEvent(DomainEvent):
    """Event emitted after a sweep of expired sessions."""
    removed_count: int
    remaining_count: int

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update({
            "removed_count": self.removed_count,
            "remaining_count": self.remaining_count,
        })
        return base_dict
