"""
API v1 - elogbook REST API

This module contains the versioned API endpoints with OpenAPI/Swagger documentation.
"""

import os

from flask import Blueprint
from flask_restx import Api

API_VERSION = os.getenv("API_VERSION", "v1")

api_v1_bp = Blueprint("api_v1", __name__, url_prefix=f"/api/{API_VERSION}")

api = Api(
    api_v1_bp,
    version="1.0",
    title="elogbook API",
    description="Personal journal API with single-use attachment download links",
    doc="/docs",  # Swagger UI at /api/v1/docs
)

# Import namespaces after api is created to avoid circular imports
from .namespaces import download_ns, entry_ns  # noqa: E402

api.add_namespace(entry_ns, path="/entries")
api.add_namespace(download_ns, path="/downloads")
