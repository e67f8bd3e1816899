"""Core configuration settings for Pushpin Core.

Settings are loaded from environment variables with .env file support via
pydantic-settings.

Environment variables:
    PUSHPIN_STORE_PATH: Directory for the local JSON document store.
                        Empty selects the in-memory store.

Configuration precedence:
    1. Environment variables (highest priority)
    2. .env file in current directory
    3. Default values (empty strings)

Example:
    >>> from pushpin_core.settings import settings
    >>> print(settings.pushpin_store_path)

Note:
    Settings are loaded once at module import and frozen. The process must be
    restarted to pick up changes to environment variables or the .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for Pushpin Core services.

    Attributes:
        pushpin_store_path: Base directory for LocalDocumentStore. When empty,
                            create_document_store() returns a MemoryDocumentStore.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Document store
    pushpin_store_path: str = ""


# Create a single, importable instance of the settings
settings = Settings()
"""Global settings instance, created at module import."""
