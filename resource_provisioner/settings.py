"""Core configuration settings for provisioning operations.

Settings are loaded from environment variables with .env file support via
pydantic-settings. They only supply defaults: explicit arguments passed to
the provisioning functions always take precedence.

Environment variables:
    PROVISION_ATTEMPTS: Attempts per ensure call before giving up (default 5)
    PROVISION_BASE_DELAY: Initial backoff in seconds between attempts (default 0)
    PROVISION_MAX_DELAY: Upper bound for a single backoff delay (default 1.0)

Example:
    >>> from resource_provisioner.settings import settings
    >>> settings.provision_attempts
    5

Note:
    Settings are loaded once at module import and frozen. The process must
    be restarted to pick up changes to environment variables or .env file.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Retry configuration for idempotent path provisioning.

    Attributes:
        provision_attempts: Maximum number of get-or-create calls per ensure
                            operation. Must be at least 1.

        provision_base_delay: Delay before the second attempt, doubled for
                              every further attempt. Zero disables sleeping.

        provision_max_delay: Cap applied to every computed delay.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    provision_attempts: int = Field(default=5, ge=1)
    provision_base_delay: float = Field(default=0.0, ge=0.0)
    provision_max_delay: float = Field(default=1.0, ge=0.0)


settings = Settings()
"""Global settings instance, created at module import."""
