"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Service
    service_name: str = "product-showcase"
    api_version: str = "1.0.0"

    # Catalog
    local_product_count: int = 100
    api_product_count: int = 24
    currency_label: str = "RON"

    # Remote catalog segment; unset means the in-process mock endpoint data
    remote_catalog_url: str | None = None
    request_timeout: float = 10.0

    # Logging
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
