"""
Download Authorization Services

Domain service for issuing, consuming, extending and sweeping
single-use download tokens.
"""

from datetime import datetime, timedelta
from typing import BinaryIO, Callable, Optional

from ..errors import (
    FileUnavailableError,
    UnknownClientError,
    UnknownOrConsumedTokenError,
)
from .session_store import SessionStore
from .value_objects import DEFAULT_TOKEN_LENGTH, DownloadDescriptor, DownloadToken

# Client id used when callers do not scope tokens to a client
DEFAULT_CLIENT_ID = "__global__"

DEFAULT_TOKEN_TTL_SECONDS = 300
DEFAULT_EXTEND_SECONDS = 300

_MAX_TOKEN_ATTEMPTS = 5


class DownloadAuthorizer:
    """
    Domain service coordinating the token lifecycle over a SessionStore.

    - issue: mint a token for a descriptor, reset the session deadline
    - consume: check-and-remove a token (single use)
    - extend: keep a client's session alive from now on
    - sweep: drop expired sessions
    """

    def __init__(
        self,
        store: SessionStore,
        token_ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS,
        extend_seconds: int = DEFAULT_EXTEND_SECONDS,
        token_length: int = DEFAULT_TOKEN_LENGTH,
        token_factory: Optional[Callable[[], str]] = None,
    ):
        """
        Initialize DownloadAuthorizer.

        Args:
            store: Shared session store
            token_ttl_seconds: Session lifetime granted by each issuance
            extend_seconds: Lifetime granted by an explicit extension
            token_length: Length of generated tokens
            token_factory: Override for token generation (tests)
        """
        self.store = store
        self.token_ttl = timedelta(seconds=token_ttl_seconds)
        self.extend_by = timedelta(seconds=extend_seconds)
        self._token_factory = token_factory or (
            lambda: str(DownloadToken.generate(token_length))
        )

    def issue(self, descriptor: DownloadDescriptor, client_id: Optional[str] = None) -> str:
        """
        Issue a new single-use token for a file.

        Never reuses an earlier token for the same file; two calls give two
        independently valid tokens.

        Args:
            descriptor: File to authorize
            client_id: Owning client, or None for the implicit global client

        Returns:
            The token string
        """
        client_id = client_id or DEFAULT_CLIENT_ID
        deadline = self.store.now() + self.token_ttl

        for _ in range(_MAX_TOKEN_ATTEMPTS):
            token = self._token_factory()
            if self.store.register(client_id, token, descriptor, deadline):
                return token

        raise RuntimeError("Could not generate a unique download token")

    def consume(self, token: str, client_id: Optional[str] = None) -> DownloadDescriptor:
        """
        Consume a token and return the descriptor it authorizes.

        Raises:
            UnknownClientError: No session for the client
            ExpiredClientError: The client's session expired
            UnknownOrConsumedTokenError: Token unknown or already used
        """
        if client_id:
            return self.store.take(client_id, token)

        # Without a client the implicit session is an implementation detail
        try:
            return self.store.take(DEFAULT_CLIENT_ID, token)
        except UnknownClientError:
            raise UnknownOrConsumedTokenError(f"Unrecognised token: {token[:8]}")

    def extend(self, client_id: str) -> Optional[datetime]:
        """
        Keep a client's session alive for extend_seconds from now.

        Unknown clients and clients whose session already expired are
        ignored silently; an expired session is never revived.

        Returns:
            New expiry, or None when the client is unknown or expired
        """
        if not self.store.touch(client_id, self.store.now() + self.extend_by):
            return None
        return self.store.expires_at(client_id)

    def sweep(self) -> int:
        """
        Remove all expired sessions.

        Returns:
            Number of sessions removed
        """
        return self.store.sweep(self.store.now())


def open_descriptor(descriptor: DownloadDescriptor) -> BinaryIO:
    """
    Open the file behind a descriptor for streaming.

    Must be called after the token has been consumed, outside the store lock.

    Raises:
        FileUnavailableError: If the path cannot be opened
    """
    try:
        return open(descriptor.file_path, "rb")
    except OSError as e:
        raise FileUnavailableError(
            f"Cannot open attachment {descriptor.original_name}", original_error=e
        )
