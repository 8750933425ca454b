"""
Test Application Factory

Builds the full application through create_app with an in-memory entry
repository and drives the listing and download endpoints end to end.
"""

import os
import tempfile
import unittest
from datetime import datetime, timezone
from unittest.mock import patch

from app_factory import AppConfig, create_app
from elogbook.domain.download_auth import SessionStore
from elogbook.domain.entries import Attachment, Entry
from tests.fixtures.in_memory_repositories import InMemoryEntryRepository


class TestAppFactory(unittest.TestCase):
    """Test application factory pattern."""

    def setUp(self):
        handle, self.saved_path = tempfile.mkstemp()
        with os.fdopen(handle, "wb") as fh:
            fh.write(b"voice memo bytes")
        self.addCleanup(os.remove, self.saved_path)

        self.repository = InMemoryEntryRepository([
            Entry(
                content="Recorded a thought",
                created_at=datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc),
                attachments=[
                    Attachment(1, self.saved_path, "memo.m4a", "audio/mp4"),
                ],
            )
        ])
        self.app = create_app(AppConfig(), entry_repository=self.repository)
        self.client = self.app.test_client()

    def test_services_attached(self):
        self.assertEqual(self.app.name, "app_factory")
        self.assertTrue(hasattr(self.app, "container"))
        self.assertTrue(self.app.container.is_registered(SessionStore))

    def test_app_has_api_blueprint(self):
        rules = [rule.rule for rule in self.app.url_map.iter_rules()]
        self.assertIn("/api/v1/entries/", rules)
        self.assertIn("/api/v1/downloads/", rules)
        self.assertIn("/api/v1/downloads/extend", rules)

    def test_health_reports_sessions(self):
        with patch("app_factory.redis_health_check", return_value=True):
            self.client.get("/api/v1/entries/?client=tab-9")
            response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertEqual(data["status"], "ok")
        self.assertEqual(data["redis"], "connected")
        self.assertEqual(data["download_sessions"], 1)

    def test_health_degraded_without_redis(self):
        with patch("app_factory.redis_health_check", return_value=False):
            response = self.client.get("/health")

        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.get_json()["status"], "degraded")

    def test_list_then_download_once(self):
        entries = self.client.get("/api/v1/entries/?client=tab-9").get_json()
        url = entries[0]["attachments"][0]["download_url"]
        self.assertTrue(url.startswith("/api/v1/downloads/?"))

        response = self.client.get(url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data, b"voice memo bytes")
        self.assertIn("memo.m4a", response.headers["Content-Disposition"])
        response.close()

        again = self.client.get(url)
        self.assertEqual(again.status_code, 404)
        self.assertEqual(again.get_json()["error"], "unknown_token")

    def test_extend_endpoint(self):
        self.client.get("/api/v1/entries/?client=tab-9")
        response = self.client.post("/api/v1/downloads/extend?client=tab-9")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {"status": "ok"})

    def test_multiple_app_instances_have_separate_stores(self):
        other = create_app(AppConfig(), entry_repository=self.repository)

        self.assertIsNot(
            self.app.container.resolve(SessionStore),
            other.container.resolve(SessionStore),
        )

    def test_listing_disabled_without_repository(self):
        with patch("app_factory._initialize_infrastructure", return_value=None):
            app = create_app(AppConfig())

        response = app.test_client().get("/api/v1/entries/")
        self.assertEqual(response.status_code, 503)
