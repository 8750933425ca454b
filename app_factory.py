"""
Application Factory

Creates and configures Flask application with all dependencies.
This factory pattern improves testability by allowing dependency injection
and configuration overrides.
"""

import os
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS

from elogbook.application.dependency_container import DependencyContainer
from elogbook.application.download_access_service import DownloadAccessService
from elogbook.application.entry_listing_service import EntryListingService
from elogbook.application.event_publisher import EventPublisher
from elogbook.config.download_auth_config import DownloadAuthConfig
from elogbook.config.redis_config import get_redis_repository, init_redis, redis_health_check
from elogbook.domain.download_auth import (
    DownloadAuthorizer,
    DownloadUrlService,
    SessionStore,
)
from elogbook.domain.entries import EntryRepository
from elogbook.infrastructure.redis_entry_repository import RedisEntryRepository


class AppConfig:
    """Application configuration."""

    def __init__(self):
        self.api_version = os.getenv("API_VERSION", "v1")
        self.flask_env = os.getenv("FLASK_ENV", "development")
        self.is_production = self.flask_env == "production"
        self.download_auth = DownloadAuthConfig()


def create_app(
    config: Optional[AppConfig] = None,
    entry_repository: Optional[EntryRepository] = None,
) -> Flask:
    """
    Create and configure Flask application.

    Args:
        config: Application configuration, uses default if None
        entry_repository: Entry storage, defaults to Redis

    Returns:
        Configured Flask application
    """
    if config is None:
        config = AppConfig()

    app = Flask(__name__)

    CORS(
        app,
        resources={
            r"/*": {
                "origins": "*",
                "methods": ["GET", "POST", "OPTIONS"],
                "allow_headers": ["Content-Type"],
                "expose_headers": ["Content-Disposition"],
                "max_age": 3600,
            }
        },
    )

    if entry_repository is None:
        entry_repository = _initialize_infrastructure(app)

    _initialize_services(app, config, entry_repository)

    _register_blueprints(app, config)

    _register_health_endpoint(app)

    return app


def _initialize_infrastructure(app: Flask) -> Optional[EntryRepository]:
    """
    Initialize Redis and the Redis-backed entry repository.

    Returns:
        Entry repository, or None if Redis could not be set up
    """
    try:
        init_redis()
        app.logger.info("Redis initialized successfully")
        return RedisEntryRepository(get_redis_repository())
    except Exception as e:
        app.logger.warning(f"Could not initialize Redis: {e}")
        return None


def _initialize_services(
    app: Flask, config: AppConfig, entry_repository: Optional[EntryRepository]
) -> None:
    """
    Build services and attach them to the app through a DependencyContainer.

    The SessionStore is created exactly once here and shared by every
    request handler through the container.

    Args:
        app: Flask application
        config: Application configuration
        entry_repository: Entry storage (listing is unavailable if None)
    """
    container = DependencyContainer()

    session_store = SessionStore()
    auth_config = config.download_auth
    authorizer = DownloadAuthorizer(
        session_store,
        token_ttl_seconds=auth_config.token_ttl_seconds,
        extend_seconds=auth_config.extend_seconds,
        token_length=auth_config.token_length,
    )

    event_publisher = EventPublisher()
    container.setup_event_handlers(event_publisher)

    access_service = DownloadAccessService(authorizer, event_publisher)
    url_service = DownloadUrlService()

    container.register_singleton(SessionStore, session_store)
    container.register_singleton(DownloadAuthorizer, authorizer)
    container.register_singleton(EventPublisher, event_publisher)
    container.register_singleton(DownloadAccessService, access_service)
    container.register_singleton(DownloadUrlService, url_service)

    if entry_repository is not None:
        listing_service = EntryListingService(entry_repository, access_service, url_service)
        container.register_singleton(EntryRepository, entry_repository)
        container.register_singleton(EntryListingService, listing_service)
    else:
        app.logger.warning("Entry repository unavailable - listing disabled")

    app.container = container
    app.logger.info(
        f"Services initialized (token ttl {auth_config.token_ttl_seconds}s, "
        f"extend {auth_config.extend_seconds}s)"
    )


def _register_blueprints(app: Flask, config: AppConfig) -> None:
    from elogbook.api.v1 import api_v1_bp

    app.register_blueprint(api_v1_bp)
    app.logger.info(
        f"API {config.api_version} registered at /api/{config.api_version} "
        f"with Swagger UI at /api/{config.api_version}/docs"
    )


def _get_health_status(app: Flask) -> tuple[dict, int]:
    """
    Get health status of all system components.

    Returns:
        Tuple of (health_status_dict, http_status_code)
    """
    health_status = {
        "status": "ok",
        "message": "backend ready",
        "redis": "unknown",
        "download_sessions": 0,
    }

    try:
        if redis_health_check():
            health_status["redis"] = "connected"
        else:
            health_status["redis"] = "disconnected"
            health_status["status"] = "degraded"
    except Exception as e:
        health_status["redis"] = f"error: {str(e)}"
        health_status["status"] = "degraded"

    container = getattr(app, "container", None)
    if container is not None and container.is_registered(SessionStore):
        health_status["download_sessions"] = container.resolve(SessionStore).session_count()

    status_code = 200 if health_status["status"] == "ok" else 503
    return health_status, status_code


def _register_health_endpoint(app: Flask) -> None:
    @app.route("/health", methods=["GET"])
    def health():
        """
        Health check endpoint.
        Returns overall health status of the application and its dependencies.
        """
        health_status, status_code = _get_health_status(app)
        return jsonify(health_status), status_code
