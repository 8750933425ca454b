"""
Download Authorization Configuration

Lifetimes and token shape for the in-memory download session store.
"""

import os

from elogbook.domain.download_auth.services import (
    DEFAULT_EXTEND_SECONDS,
    DEFAULT_TOKEN_TTL_SECONDS,
)
from elogbook.domain.download_auth.value_objects import (
    DEFAULT_TOKEN_LENGTH,
    MIN_TOKEN_LENGTH,
)


class DownloadAuthConfig:
    """Download token settings, read from the environment."""

    def __init__(self):
        self.token_ttl_seconds = int(
            os.getenv("DOWNLOAD_TOKEN_TTL_SECONDS", DEFAULT_TOKEN_TTL_SECONDS)
        )
        self.extend_seconds = int(
            os.getenv("DOWNLOAD_EXTEND_SECONDS", DEFAULT_EXTEND_SECONDS)
        )
        self.token_length = max(
            MIN_TOKEN_LENGTH,
            int(os.getenv("DOWNLOAD_TOKEN_LENGTH", DEFAULT_TOKEN_LENGTH)),
        )

        if self.token_ttl_seconds <= 0:
            raise ValueError("DOWNLOAD_TOKEN_TTL_SECONDS must be positive")
        if self.extend_seconds <= 0:
            raise ValueError("DOWNLOAD_EXTEND_SECONDS must be positive")
