"""
Entry Listing Service

Renders a page of journal entries for a client. Each render sweeps expired
download sessions and issues fresh single-use links for every attachment.
"""

import logging
from typing import Any, Dict, List, Optional

from elogbook.domain.download_auth import DownloadUrlService
from elogbook.domain.entries import Entry, EntryRepository

from .download_access_service import DownloadAccessService

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


class EntryListingService:
    """
    Application service for the entry listing.

    The listing is the only producer of download tokens and the trigger for
    the sweeper, which keeps the session store bounded under normal traffic.
    """

    def __init__(
        self,
        entry_repository: EntryRepository,
        access_service: DownloadAccessService,
        url_service: DownloadUrlService,
    ):
        self.entry_repository = entry_repository
        self.access_service = access_service
        self.url_service = url_service

    def list_entries(
        self,
        client_id: Optional[str] = None,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> List[Dict[str, Any]]:
        """
        List entries newest first, with download URLs for attachments.

        Args:
            client_id: Client the links are issued to (None: flat links)
            limit: Page size, clamped to [1, MAX_PAGE_SIZE]
            offset: Number of entries to skip

        Returns:
            List of entry response dictionaries
        """
        removed = self.access_service.sweep()
        if removed:
            logger.debug(f"Swept {removed} expired download session(s)")

        limit = max(1, min(limit, MAX_PAGE_SIZE))
        offset = max(0, offset)

        entries = self.entry_repository.get_page(limit, offset)
        return [self._render_entry(entry, client_id) for entry in entries]

    def _render_entry(self, entry: Entry, client_id: Optional[str]) -> Dict[str, Any]:
        attachments = []
        for attachment in entry.attachments:
            try:
                descriptor = attachment.to_descriptor()
            except ValueError as e:
                logger.warning(
                    f"Skipping attachment {attachment.id} of entry {entry.id}: {e}"
                )
                continue

            token = self.access_service.issue(descriptor, client_id)
            # saved_path stays server-side
            attachments.append({
                "id": attachment.id,
                "mime": attachment.mime,
                "original_name": attachment.original_name,
                "download_url": self.url_service.url_for(token, client_id),
            })

        return {
            "id": entry.id,
            "content": entry.content,
            "created_at": entry.created_at.isoformat(),
            "attachments": attachments,
        }
