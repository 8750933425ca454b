from urllib.parse import parse_qs, urlparse

from elogbook.domain.download_auth import DownloadUrlService


class TestDownloadUrlService:
    def test_default_relative_base(self, monkeypatch):
        monkeypatch.delenv("DOWNLOAD_BASE_URL", raising=False)
        monkeypatch.delenv("API_BASE_URL", raising=False)

        service = DownloadUrlService()

        assert service.flat_url("abc") == "/api/v1/downloads/abc"

    def test_download_base_env_preferred(self, monkeypatch):
        monkeypatch.setenv("DOWNLOAD_BASE_URL", "https://files.example.org/")
        monkeypatch.setenv("API_BASE_URL", "https://api.example.org")

        service = DownloadUrlService()

        assert service.base_url == "https://files.example.org/api/v1/downloads"

    def test_api_base_fallback(self, monkeypatch):
        monkeypatch.delenv("DOWNLOAD_BASE_URL", raising=False)
        monkeypatch.setenv("API_BASE_URL", "https://api.example.org")

        assert DownloadUrlService().base_url == "https://api.example.org/api/v1/downloads"

    def test_explicit_base_wins(self, monkeypatch):
        monkeypatch.setenv("DOWNLOAD_BASE_URL", "https://files.example.org")
        service = DownloadUrlService(base_url="http://localhost:8080/dl/")
        assert service.base_url == "http://localhost:8080/dl"

    def test_client_url_encodes_parameters(self):
        service = DownloadUrlService(base_url="/api/v1/downloads")

        url = service.client_url("tab 1&x", "Tok123")
        parsed = urlparse(url)

        assert parsed.path == "/api/v1/downloads/"
        assert parse_qs(parsed.query) == {"client": ["tab 1&x"], "token": ["Tok123"]}

    def test_url_for_picks_variant(self):
        service = DownloadUrlService(base_url="/dl")
        assert service.url_for("T") == "/dl/T"
        assert service.url_for("T", "c1") == "/dl/?client=c1&token=T"
