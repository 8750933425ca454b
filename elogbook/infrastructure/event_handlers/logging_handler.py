"""
Logging Event Handler

Infrastructure event handler for logging domain events.
Domain layer remains unaware of logging infrastructure.
"""

import logging

from elogbook.domain.events import (
    DomainEvent,
    DownloadRejectedEvent,
    SessionExtendedEvent,
    SessionsSweptEvent,
    TokenConsumedEvent,
    TokenIssuedEvent,
)


class LoggingEventHandler:
    """
    Infrastructure event handler for logging domain events.

    Only token prefixes are ever logged.
    """

    def __init__(self, logger: logging.Logger):
        """
        Initialize with logger instance.

        Args:
            logger: Python logging.Logger instance
        """
        self.logger = logger

    def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event by logging it.

        Args:
            event: Domain event to log
        """
        try:
            if isinstance(event, TokenIssuedEvent):
                self._handle_token_issued(event)
            elif isinstance(event, TokenConsumedEvent):
                self._handle_token_consumed(event)
            elif isinstance(event, DownloadRejectedEvent):
                self._handle_download_rejected(event)
            elif isinstance(event, SessionExtendedEvent):
                self._handle_session_extended(event)
            elif isinstance(event, SessionsSweptEvent):
                self._handle_sessions_swept(event)
            else:
                self.logger.debug(
                    f"Unhandled event: {event.__class__.__name__} "
                    f"(aggregate_id={event.aggregate_id})"
                )
        except Exception as e:
            # Log handler errors but don't fail the operation
            self.logger.error(
                f"Error in logging event handler for {event.__class__.__name__}: {e}",
                exc_info=True,
            )

    def _handle_token_issued(self, event: TokenIssuedEvent) -> None:
        self.logger.debug(
            f"Download token issued: client={event.aggregate_id}, "
            f"token={event.token_prefix}..., file={event.original_name}, "
            f"session_expires_at={event.expires_at.isoformat()}"
        )

    def _handle_token_consumed(self, event: TokenConsumedEvent) -> None:
        self.logger.info(
            f"Download token consumed: client={event.aggregate_id}, "
            f"token={event.token_prefix}..., file={event.original_name}"
        )

    def _handle_download_rejected(self, event: DownloadRejectedEvent) -> None:
        self.logger.warning(
            f"Download rejected: client={event.aggregate_id}, "
            f"token={event.token_prefix}..., reason={event.reason}"
        )

    def _handle_session_extended(self, event: SessionExtendedEvent) -> None:
        if event.expires_at is None:
            self.logger.debug(f"Extend ignored for unknown client {event.aggregate_id}")
        else:
            self.logger.info(
                f"Download session extended: client={event.aggregate_id}, "
                f"expires_at={event.expires_at.isoformat()}"
            )

    def _handle_sessions_swept(self, event: SessionsSweptEvent) -> None:
        self.logger.info(
            f"Swept {event.removed_count} expired download session(s), "
            f"{event.remaining_count} remaining"
        )
