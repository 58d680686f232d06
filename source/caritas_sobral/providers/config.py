"""This module defines the configuration management for the application.

It uses Pydantic's BaseSettings to create a strongly-typed configuration
class that reads from environment variables and .env files. This ensures
all required configuration is present and valid at startup.
"""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_REFERENCE_TIMEZONE = "America/Sao_Paulo"
FIVE_MEGABYTES = 5 * 1024 * 1024


class Config(BaseSettings):
    """A Pydantic model for managing application settings.

    It automatically loads configuration from environment variables and .env files.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    POSTGRES_DRIVER: str = "postgresql"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: str = "5432"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "caritas_sobral"
    POSTGRES_DB_SCHEMA: str | None = None

    USE_CLOUD_SQL_AUTH: bool = False
    INSTANCE_CONNECTION_NAME: str | None = None

    LOG_LEVEL: str = "INFO"

    GCP_PROJECT: str = "caritas-sobral"
    GCP_GCS_HOST: str | None = None
    GCP_GCS_PUBLIC_URL: str | None = None
    GCP_GCS_BUCKET_EDITAIS: str = "editais"
    GCP_GCS_BUCKET_NOTICIAS: str = "noticias"
    GCP_GCS_BUCKET_PATRIMONIO: str = "patrimonio"

    UPLOAD_CACHE_CONTROL: str = "public, max-age=3600"
    UPLOAD_MAX_IMAGE_BYTES: int = FIVE_MEGABYTES
    UPLOAD_MAX_DOCUMENT_BYTES: int = 4 * FIVE_MEGABYTES

    SESSION_SECRET_KEY: str = "change-me"
    SESSION_COOKIE_NAME: str = "caritas_session"
    SESSION_MAX_AGE_SECONDS: int = 8 * 60 * 60
    SESSION_HTTPS_ONLY: bool = False

    REFERENCE_TIMEZONE: str = DEFAULT_REFERENCE_TIMEZONE
    ADMIN_PAGE_SIZE: int = 10
    PUBLIC_PAGE_SIZE: int = 9
    NEWS_CAROUSEL_LIMIT: int = 10
    QUERY_CACHE_TTL_SECONDS: int = 60
    QUERY_CACHE_MAX_ENTRIES: int = 512

    CONTACT_WHATSAPP_NUMBER: str = "5588994253039"

    @model_validator(mode="after")
    def set_derived_public_url(self) -> "Config":
        """Derives the public base URL for stored objects when it is not set.

        Objects uploaded to the emulator are served from the emulator host,
        everything else from the public Google Cloud Storage endpoint.

        Returns:
            The modified Config object.
        """
        if self.GCP_GCS_PUBLIC_URL is None:
            if self.GCP_GCS_HOST:
                self.GCP_GCS_PUBLIC_URL = self.GCP_GCS_HOST.rstrip("/")
            else:
                self.GCP_GCS_PUBLIC_URL = "https://storage.googleapis.com"

        return self


class ConfigProvider:
    """A provider class that acts as a factory for the application's configuration.

    It does not hold state but provides a method to create fresh config instances.
    """

    @staticmethod
    def get_config() -> Config:
        """Factory method that instantiates and returns a new Config object.

        Calling this function will always create a new instance of the Config model,
        which forces Pydantic to reload and re-validate all settings from the
        current environment variables. This ensures the configuration is always fresh.

        Returns:
            A new, validated Config object.
        """
        return Config()
