"""
Unit tests for client settings
"""
from tracknstock.core.config import DEFAULT_API_BASE_URL, Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("API_BASE_URL", raising=False)
        monkeypatch.delenv("REACT_APP_API_BASE_URL", raising=False)

        settings = Settings(_env_file=None)

        assert settings.API_BASE_URL == DEFAULT_API_BASE_URL
        assert settings.API_TIMEOUT == 30.0

    def test_base_url_from_environment(self, monkeypatch):
        monkeypatch.setenv("API_BASE_URL", "https://inventory.example.com/api/products/")

        settings = Settings(_env_file=None)

        assert settings.get_api_base_url() == "https://inventory.example.com/api/products"

    def test_legacy_frontend_variable_accepted(self, monkeypatch):
        monkeypatch.delenv("API_BASE_URL", raising=False)
        monkeypatch.setenv("REACT_APP_API_BASE_URL", "http://backend:8080/api/products")

        settings = Settings(_env_file=None)

        assert settings.API_BASE_URL == "http://backend:8080/api/products"
