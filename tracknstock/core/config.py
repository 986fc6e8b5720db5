"""
Centralized client configuration
"""
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_API_BASE_URL = "http://localhost:8080/api/products"


class Settings(BaseSettings):
    """Client configuration, read from the environment or a .env file"""

    # API Settings
    # REACT_APP_API_BASE_URL is still honoured for deployments configured
    # for the old web frontend
    API_BASE_URL: str = Field(
        DEFAULT_API_BASE_URL,
        validation_alias=AliasChoices("API_BASE_URL", "REACT_APP_API_BASE_URL"),
    )
    API_TIMEOUT: float = 30.0

    # Logging
    LOG_LEVEL: str = "INFO"

    # CSV export
    EXPORT_DIR: str = "."

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    def get_api_base_url(self) -> str:
        """Base URL without trailing slash"""
        return self.API_BASE_URL.rstrip("/")


settings = Settings()
