"""
Download Authorization Entities

Client sessions grouping single-use download tokens under one expiry.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

from .value_objects import DownloadDescriptor


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass
class ClientSession:
    """
    Entity representing one client's batch of download tokens.

    The session owns its tokens; when it expires they all become
    unreachable at once. A session with no tokens left is still valid
    until expires_at.
    """
    expires_at: datetime
    tokens: Dict[str, DownloadDescriptor] = field(default_factory=dict)

    @classmethod
    def create(cls, now: Optional[datetime] = None) -> 'ClientSession':
        """
        Create an empty session with a tentative, immediate expiry.

        Issuance moves the deadline forward right after creation.
        """
        return cls(expires_at=now or utcnow())

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """
        Check if the session has expired.

        Args:
            now: Reference time, defaults to the current UTC time

        Returns:
            True if expired, False otherwise
        """
        return (now or utcnow()) >= self.expires_at

    def extend_to(self, deadline: datetime) -> datetime:
        """
        Move the expiry forward to deadline. Never moves it backwards.

        Returns:
            The resulting expiry
        """
        if deadline > self.expires_at:
            self.expires_at = deadline
        return self.expires_at

    def get_remaining_time(self, now: Optional[datetime] = None) -> timedelta:
        return self.expires_at - (now or utcnow())

    def get_remaining_seconds(self, now: Optional[datetime] = None) -> int:
        """
        Get remaining seconds until expiration.

        Returns:
            Seconds remaining (0 if expired)
        """
        remaining = self.get_remaining_time(now)
        return max(0, int(remaining.total_seconds()))

    def snapshot(self) -> 'ClientSession':
        """Detached copy, safe to hand out past the store lock."""
        return ClientSession(expires_at=self.expires_at, tokens=dict(self.tokens))
