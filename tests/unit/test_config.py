"""
Tests for environment-driven configuration.
"""

import pytest

from elogbook.config.download_auth_config import DownloadAuthConfig
from elogbook.config.redis_config import RedisConfig, get_redis_client


class TestDownloadAuthConfig:
    def test_defaults(self, monkeypatch):
        for name in ("DOWNLOAD_TOKEN_TTL_SECONDS", "DOWNLOAD_EXTEND_SECONDS", "DOWNLOAD_TOKEN_LENGTH"):
            monkeypatch.delenv(name, raising=False)

        config = DownloadAuthConfig()

        assert config.token_ttl_seconds == 300
        assert config.extend_seconds == 300
        assert config.token_length == 30

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("DOWNLOAD_TOKEN_TTL_SECONDS", "60")
        monkeypatch.setenv("DOWNLOAD_EXTEND_SECONDS", "120")
        monkeypatch.setenv("DOWNLOAD_TOKEN_LENGTH", "40")

        config = DownloadAuthConfig()

        assert (config.token_ttl_seconds, config.extend_seconds, config.token_length) == (60, 120, 40)

    def test_token_length_has_floor(self, monkeypatch):
        monkeypatch.setenv("DOWNLOAD_TOKEN_LENGTH", "8")
        assert DownloadAuthConfig().token_length == 24

    @pytest.mark.parametrize("name", ["DOWNLOAD_TOKEN_TTL_SECONDS", "DOWNLOAD_EXTEND_SECONDS"])
    def test_non_positive_lifetimes_rejected(self, monkeypatch, name):
        monkeypatch.setenv(name, "0")
        with pytest.raises(ValueError):
            DownloadAuthConfig()


class TestRedisConfig:
    def test_url_overrides_parts(self, monkeypatch):
        monkeypatch.setenv("REDIS_HOST", "ignored")
        monkeypatch.setenv("REDIS_URL", "redis://:secret@cache.internal:6380/2")

        config = RedisConfig()

        assert config.host == "cache.internal"
        assert config.port == 6380
        assert config.db == 2
        assert config.password == "secret"

    def test_client_requires_init(self, monkeypatch):
        monkeypatch.setattr("elogbook.config.redis_config._redis_manager", None)
        with pytest.raises(RuntimeError):
            get_redis_client()
