"""
Application configuration.

Loads settings from environment variables and .env file.
Upstream endpoints and the CORS origin live here so tests can point
the service at mock upstreams.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        allow_origin: The single origin allowed by CORS.
        lokalise_api_url: Base URL of the Lokalise API v2.
        conversion_service_url: Endpoint converting a zipped DOCX URL to PDF.
        upstream_timeout_seconds: Deadline applied to every upstream call.
        comments_limit: Maximum number of comments fetched per project.
        keys_page_size: Number of key ids resolved per keys request.
        keys_first_page_only: Reproduce the legacy worker, which only ever
            resolved the first page of keys (minus one).
        strict_conversion_status: Reject non-2xx answers from the
            conversion service instead of passing them through.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Lokalise Preview Proxy"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    allow_origin: str = "https://app.lokalise.com"
    lokalise_api_url: str = "https://api.lokalise.com/api2"
    conversion_service_url: str = (
        "https://docx-to-pdf-convert-with-libreoffice.fly.dev/convert-zip-from-url"
    )
    upstream_timeout_seconds: float = 30.0

    comments_limit: int = 5000
    keys_page_size: int = 300
    keys_first_page_only: bool = False
    strict_conversion_status: bool = False


settings = Settings()
