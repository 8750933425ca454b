"""
Application Layer

Application services orchestrating the domain for the API layer.
"""

from .dependency_container import DependencyContainer, DependencyNotFoundError
from .download_access_service import DownloadAccessService
from .entry_listing_service import EntryListingService
from .event_publisher import EventPublisher

__all__ = [
    "DependencyContainer",
    "DependencyNotFoundError",
    "DownloadAccessService",
    "EntryListingService",
    "EventPublisher",
]
