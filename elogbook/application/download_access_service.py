"""
Download Access Service

Application service around the token lifecycle. Wraps the domain
DownloadAuthorizer, splits consumption into a locked bookkeeping phase and
an unlocked file-open phase, and publishes domain events.
"""

import logging
from typing import BinaryIO, Optional, Tuple

from elogbook.domain.download_auth import (
    DEFAULT_CLIENT_ID,
    DownloadAuthorizer,
    DownloadDescriptor,
    open_descriptor,
)
from elogbook.domain.errors import (
    DownloadAuthorizationError,
    ErrorCategory,
    ExpiredClientError,
    FileUnavailableError,
    UnknownClientError,
    UnknownOrConsumedTokenError,
)
from elogbook.domain.events import (
    DownloadRejectedEvent,
    SessionExtendedEvent,
    SessionsSweptEvent,
    TokenConsumedEvent,
    TokenIssuedEvent,
)

from .event_publisher import EventPublisher

logger = logging.getLogger(__name__)

_TOKEN_PREFIX_LEN = 8


class DownloadAccessService:
    """
    Application service for issuing and redeeming download tokens.

    Used by:
    - the entry listing (issue, sweep)
    - the download endpoints (open_download)
    - the extend endpoint (extend)
    """

    def __init__(
        self,
        authorizer: DownloadAuthorizer,
        event_publisher: Optional[EventPublisher] = None,
    ):
        self.authorizer = authorizer
        self.event_publisher = event_publisher

    def issue(self, descriptor: DownloadDescriptor, client_id: Optional[str] = None) -> str:
        """
        Issue a token for one attachment.

        Args:
            descriptor: File to authorize
            client_id: Owning client, None for the flat variant

        Returns:
            Token string
        """
        token = self.authorizer.issue(descriptor, client_id)
        store = self.authorizer.store
        owner = client_id or DEFAULT_CLIENT_ID

        self._publish(
            TokenIssuedEvent(
                aggregate_id=owner,
                occurred_at=store.now(),
                token_prefix=token[:_TOKEN_PREFIX_LEN],
                original_name=descriptor.original_name,
                expires_at=store.expires_at(owner) or store.now(),
            )
        )
        return token

    def open_download(
        self, token: str, client_id: Optional[str] = None
    ) -> Tuple[DownloadDescriptor, BinaryIO]:
        """
        Redeem a token and open the file it points to.

        Phase one (store lock held inside the authorizer) removes the token.
        Phase two opens the file with no lock held. A token consumed in phase
        one stays consumed even if phase two fails.

        Returns:
            Tuple of (descriptor, open binary file); the caller closes the file

        Raises:
            UnknownClientError, ExpiredClientError,
            UnknownOrConsumedTokenError, FileUnavailableError
        """
        owner = client_id or DEFAULT_CLIENT_ID
        try:
            descriptor = self.authorizer.consume(token, client_id)
            stream = open_descriptor(descriptor)
        except DownloadAuthorizationError as e:
            self._publish(
                DownloadRejectedEvent(
                    aggregate_id=owner,
                    occurred_at=self.authorizer.store.now(),
                    token_prefix=token[:_TOKEN_PREFIX_LEN],
                    reason=self.categorize_error(e).value,
                )
            )
            raise

        self._publish(
            TokenConsumedEvent(
                aggregate_id=owner,
                occurred_at=self.authorizer.store.now(),
                token_prefix=token[:_TOKEN_PREFIX_LEN],
                original_name=descriptor.original_name,
            )
        )
        return descriptor, stream

    def extend(self, client_id: str):
        """
        Extend a client's session. Unknown clients are a silent no-op.

        Returns:
            New expiry or None
        """
        expires_at = self.authorizer.extend(client_id)
        self._publish(
            SessionExtendedEvent(
                aggregate_id=client_id,
                occurred_at=self.authorizer.store.now(),
                expires_at=expires_at,
            )
        )
        return expires_at

    def sweep(self) -> int:
        """
        Drop expired sessions.

        Returns:
            Number of sessions removed
        """
        removed = self.authorizer.sweep()
        if removed:
            self._publish(
                SessionsSweptEvent(
                    aggregate_id="session_store",
                    occurred_at=self.authorizer.store.now(),
                    removed_count=removed,
                    remaining_count=self.authorizer.store.session_count(),
                )
            )
        return removed

    @staticmethod
    def categorize_error(error: DownloadAuthorizationError) -> ErrorCategory:
        """Map a download failure to its outward error category."""
        if isinstance(error, UnknownClientError):
            return ErrorCategory.UNKNOWN_CLIENT
        if isinstance(error, ExpiredClientError):
            return ErrorCategory.EXPIRED_CLIENT
        if isinstance(error, UnknownOrConsumedTokenError):
            return ErrorCategory.UNKNOWN_TOKEN
        if isinstance(error, FileUnavailableError):
            return ErrorCategory.FILE_UNAVAILABLE
        return ErrorCategory.SYSTEM_ERROR

    def _publish(self, event) -> None:
        if self.event_publisher is not None:
            self.event_publisher.publish(event)
