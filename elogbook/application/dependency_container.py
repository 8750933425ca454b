"""
Dependency Injection Container

Holds the per-process service instances that create_app builds and the
API layer resolves per request.
"""

import logging
import threading
from typing import Any, Dict, List, Optional, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


class DependencyNotFoundError(Exception):
    """Raised when attempting to resolve an unregistered dependency."""
    pass


class DependencyContainer:
    """
    Registry of shared service instances keyed by their type.

    Every registration is a singleton: the SessionStore in particular must be
    one object for the whole process. Thread-safe for concurrent requests.
    """

    def __init__(self):
        self._instances: Dict[Type, Any] = {}
        self._lock = threading.Lock()

    def register_singleton(self, interface: Type[T], implementation: T) -> None:
        """
        Register the instance returned for interface.

        Example:
            container.register_singleton(SessionStore, session_store)
        """
        with self._lock:
            self._instances[interface] = implementation
        logger.debug(f"Registered singleton: {interface.__name__}")

    def resolve(self, interface: Type[T]) -> T:
        """
        Return the instance registered for interface.

        Raises:
            DependencyNotFoundError: If the interface is not registered
        """
        with self._lock:
            try:
                return self._instances[interface]
            except KeyError:
                raise DependencyNotFoundError(
                    f"No registration found for type: {interface.__name__}"
                )

    def is_registered(self, interface: Type) -> bool:
        with self._lock:
            return interface in self._instances

    def setup_event_handlers(
        self,
        event_publisher,
        event_handler_classes: Optional[List[Type]] = None,
    ) -> None:
        """
        Subscribe infrastructure event handlers to every domain event.

        Args:
            event_publisher: EventPublisher instance to subscribe handlers to
            event_handler_classes: Handler classes to instantiate; defaults to
                LoggingEventHandler on the "elogbook" logger
        """
        from elogbook.domain.events import DomainEvent
        from elogbook.infrastructure.event_handlers.logging_handler import LoggingEventHandler

        if event_handler_classes is None:
            event_handler_classes = [LoggingEventHandler]

        for handler_class in event_handler_classes:
            if handler_class is LoggingEventHandler:
                handler = handler_class(logging.getLogger("elogbook"))
            else:
                handler = handler_class()

            event_publisher.subscribe(DomainEvent, handler.handle)
            logger.debug(f"Registered event handler: {handler_class.__name__}")
