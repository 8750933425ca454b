"""
Download Authorization Domain

Short-lived, single-use tokens granting access to attachment files
without exposing their paths.
"""

from .download_url_service import DownloadUrlService
from .entities import ClientSession
from .services import DEFAULT_CLIENT_ID, DownloadAuthorizer, open_descriptor
from .session_store import SessionStore
from .value_objects import DownloadDescriptor, DownloadToken, InvalidDownloadTokenError

__all__ = [
    "ClientSession",
    "DEFAULT_CLIENT_ID",
    "DownloadAuthorizer",
    "DownloadDescriptor",
    "DownloadToken",
    "DownloadUrlService",
    "InvalidDownloadTokenError",
    "SessionStore",
    "open_descriptor",
]
