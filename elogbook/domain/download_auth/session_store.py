"""
Session Store

Process-wide, in-memory mapping of client identifiers to their download
sessions. Every operation runs under one exclusive lock, held only for
the map operation itself.
"""

import threading
from datetime import datetime
from typing import Callable, Dict, Optional

from ..errors import (
    DownloadAuthorizationError,
    ExpiredClientError,
    UnknownClientError,
    UnknownOrConsumedTokenError,
)
from .entities import ClientSession, utcnow
from .value_objects import DownloadDescriptor


class SessionStore:
    """
    Concurrency-safe store of ClientSession objects keyed by client id.

    Nothing here performs I/O or calls back into other components while
    the lock is held, so a slow caller never blocks token operations of
    other requests. The lock is never acquired re-entrantly.
    """

    def __init__(self, clock: Callable[[], datetime] = utcnow):
        """
        Initialize an empty store.

        Args:
            clock: Callable returning the current aware datetime
        """
        self._sessions: Dict[str, ClientSession] = {}
        self._lock = threading.Lock()
        self._clock = clock

    def now(self) -> datetime:
        return self._clock()

    def get_or_create(self, client_id: str) -> ClientSession:
        """
        Return the client's session, creating an empty one if missing.

        New sessions start with an expiry of "now"; they only become
        useful once a token is registered or the expiry is touched.

        Returns:
            Snapshot of the session (mutations must go through the store)
        """
        with self._lock:
            return self._get_or_create_locked(client_id).snapshot()

    def touch(self, client_id: str, new_expiry: datetime) -> bool:
        """
        Move a session's expiry forward.

        Args:
            client_id: Client identifier
            new_expiry: Requested deadline, ignored if earlier than the current one

        Returns:
            True if a live session exists, False if the call was a no-op.
            An expired session counts as absent and is left for the sweeper.
        """
        with self._lock:
            session = self._sessions.get(client_id)
            if session is None or session.is_expired(self._clock()):
                return False
            session.extend_to(new_expiry)
            return True

    def register(
        self,
        client_id: str,
        token: str,
        descriptor: DownloadDescriptor,
        expires_at: datetime,
    ) -> bool:
        """
        Store a token under the client's session and extend its expiry.

        Creation of the session, insertion and the expiry update happen in
        one locked step. An expired session is replaced by a fresh one, so
        its stale tokens never come back.

        Returns:
            False if the token is already present in that session
        """
        with self._lock:
            now = self._clock()
            session = self._sessions.get(client_id)
            if session is None or session.is_expired(now):
                session = ClientSession.create(now)
                self._sessions[client_id] = session
            if token in session.tokens:
                return False
            session.tokens[token] = descriptor
            session.extend_to(expires_at)
            return True

    def take(self, client_id: str, token: str) -> DownloadDescriptor:
        """
        Atomically check and remove a token.

        Raises:
            UnknownClientError: No session for client_id
            ExpiredClientError: Session deadline passed (session is kept for the sweeper)
            UnknownOrConsumedTokenError: Token not in the session
        """
        with self._lock:
            session = self._sessions.get(client_id)
            if session is None:
                raise UnknownClientError(f"Unrecognised client: {client_id}")

            if session.is_expired(self._clock()):
                raise ExpiredClientError(f"Expired client: {client_id}")

            descriptor = session.tokens.pop(token, None)

        if descriptor is None:
            raise UnknownOrConsumedTokenError(f"Unrecognised token: {token[:8]}")
        return descriptor

    def remove_token(self, client_id: str, token: str) -> Optional[DownloadDescriptor]:
        """
        Same as take(), returning None instead of raising.
        """
        try:
            return self.take(client_id, token)
        except DownloadAuthorizationError:
            return None

    def sweep(self, now: Optional[datetime] = None) -> int:
        """
        Drop every session whose expiry is at or before now.

        Unconsumed tokens of those sessions go with them.

        Returns:
            Number of sessions removed
        """
        with self._lock:
            now = now or self._clock()
            expired = [
                client_id
                for client_id, session in self._sessions.items()
                if session.expires_at <= now
            ]
            for client_id in expired:
                del self._sessions[client_id]
            return len(expired)

    def session_count(self) -> int:
        with self._lock:
            return len(self._sessions)

    def token_count(self, client_id: str) -> int:
        with self._lock:
            session = self._sessions.get(client_id)
            return len(session.tokens) if session else 0

    def expires_at(self, client_id: str) -> Optional[datetime]:
        with self._lock:
            session = self._sessions.get(client_id)
            return session.expires_at if session else None

    def _get_or_create_locked(self, client_id: str) -> ClientSession:
        session = self._sessions.get(client_id)
        if session is None:
            session = ClientSession.create(self._clock())
            self._sessions[client_id] = session
        return session
