"""
Download URL Service

Builds the links handed to clients for token-based downloads.
The real file path never appears in a link.
"""

import os
from typing import Optional
from urllib.parse import urlencode

DEFAULT_DOWNLOAD_PATH = "/api/v1/downloads"


class DownloadUrlService:
    """
    Service for turning tokens into download URLs.

    Supports both the client-scoped form (query parameters) and the
    flat form (token embedded in the path).
    """

    def __init__(self, base_url: Optional[str] = None):
        """
        Initialize DownloadUrlService.

        Args:
            base_url: Base URL for download endpoints. If not provided, will use
                the `DOWNLOAD_BASE_URL` environment variable for public client access,
                falling back to `API_BASE_URL`. If neither is set, the relative
                path '/api/v1/downloads' is used.
        """
        if base_url:
            self.base_url = base_url.rstrip("/")
        else:
            download_base = os.getenv("DOWNLOAD_BASE_URL")
            api_base = os.getenv("API_BASE_URL")
            if download_base:
                self.base_url = download_base.rstrip("/") + DEFAULT_DOWNLOAD_PATH
            elif api_base:
                self.base_url = api_base.rstrip("/") + DEFAULT_DOWNLOAD_PATH
            else:
                self.base_url = DEFAULT_DOWNLOAD_PATH

    def client_url(self, client_id: str, token: str) -> str:
        """
        URL for a client-scoped token.

        Example: /api/v1/downloads/?client=tab-1&token=Ab3...
        """
        query = urlencode({"client": client_id, "token": token})
        return f"{self.base_url}/?{query}"

    def flat_url(self, token: str) -> str:
        """URL for a token issued without a client id."""
        return f"{self.base_url}/{token}"

    def url_for(self, token: str, client_id: Optional[str] = None) -> str:
        if client_id:
            return self.client_url(client_id, token)
        return self.flat_url(token)
