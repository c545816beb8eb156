"""Factory for application settings used across tests."""

from oillab.settings import Settings


def create_test_settings(**overrides) -> Settings:
    """
    Build settings with every required value filled in.

    ``.env`` files are ignored so tests do not depend on the working
    directory.

    Args:
        **overrides: Setting values replacing the defaults below.

    Returns:
        Settings: Frozen settings instance
    """
    values = {
        "APP_MODE": "development",
        "APP_SECRET": "test-secret",
        "APP_ORIGIN": "http://localhost:8080",
        "APP_PORT": 3000,
        "DB_HOST": "localhost",
        "DB_PORT": 5432,
        "DB_USER": "test-user",
        "DB_PASSWORD": "test-password",
        "DB_NAME": "oillab_test",
        "S3_ENDPOINT": "http://localhost:9000",
        "S3_ACCESS_KEY_ID": "test-key",
        "S3_SECRET_ACCESS_KEY": "test-secret-key",
        "S3_REGION": "us-east-1",
        "S3_BUCKET": "oillab",
        "S3_URL": "http://localhost:9000/oillab",
        "LOG_FILE_PATH": "/tmp/oillab-test-errors.log",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)
