from functools import lru_cache
from typing import Any

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )

    # Application settings
    APP_MODE: str = ""
    APP_SECRET: SecretStr = SecretStr("")
    APP_ORIGIN: str = ""
    APP_PORT: int | None = None

    # Database settings (MUST be provided via environment)
    DB_USER: str = ""
    DB_PASSWORD: SecretStr = SecretStr("")
    DB_HOST: str = ""
    DB_PORT: int | None = None
    DB_NAME: str = ""
    DB_POOL_SIZE: int = 20
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_PRE_PING: bool = True

    # Database initialization settings
    DB_INIT_RETRY_INTERVAL: int = 2
    DB_INIT_MAX_RETRIES: int = 5

    # Object storage settings
    S3_ENDPOINT: str = ""
    S3_ACCESS_KEY_ID: str = ""
    S3_SECRET_ACCESS_KEY: SecretStr = SecretStr("")
    S3_REGION: str = ""
    S3_BUCKET: str = ""
    S3_URL: str = ""

    # Mail settings
    SMTP_HOST: str = ""
    SMTP_PORT: int = 587
    SMTP_USER: str = ""
    SMTP_PASSWORD: SecretStr = SecretStr("")
    SMTP_SECURE: bool = False

    # Pagination settings
    DEFAULT_PAGE_SIZE: int = 12
    MAX_PAGE_SIZE: int = 100

    # Logging settings
    LOG_LEVEL: str = "INFO"
    LOG_FILE_PATH: str = "logs/logging_errors.log"

    @property
    def is_production(self) -> bool:
        """Anything but an explicit development mode counts as production."""
        return self.APP_MODE != "development"

    @property
    def cors_origins(self) -> list[str]:
        return [
            origin.strip()
            for origin in self.APP_ORIGIN.split(",")
            if origin.strip()
        ]

    @property
    def DATABASE_URL(self) -> str:
        """Construct the database URL from individual components."""
        password = self.DB_PASSWORD.get_secret_value()
        port = f":{self.DB_PORT}" if self.DB_PORT else ""
        return (
            f"postgresql+asyncpg://{self.DB_USER}:{password}"
            f"@{self.DB_HOST}{port}/{self.DB_NAME}"
        )

    def s3_client_config(self) -> dict[str, Any]:
        """
        Keyword arguments for an S3-compatible client.

        Path-style addressing is forced because the bucket is served by a
        self-hosted endpoint, not by virtual-host DNS.
        """
        return {
            "endpoint_url": self.S3_ENDPOINT,
            "aws_access_key_id": self.S3_ACCESS_KEY_ID,
            "aws_secret_access_key": self.S3_SECRET_ACCESS_KEY.get_secret_value(),
            "region_name": self.S3_REGION,
            "addressing_style": "path",
        }

    def smtp_config(self) -> dict[str, Any]:
        return {
            "host": self.SMTP_HOST,
            "port": self.SMTP_PORT,
            "user": self.SMTP_USER,
            "password": self.SMTP_PASSWORD.get_secret_value(),
            "secure": self.SMTP_SECURE,
        }


@lru_cache
def get_settings() -> Settings:
    """
    Build the settings object once per process.

    Collaborators receive the returned instance explicitly; tests can call
    ``get_settings.cache_clear()`` or pass their own ``Settings``.
    """
    return Settings()
