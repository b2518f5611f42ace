"""Configuration for the Medium blog feed using pydantic-settings."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.paths import ENV_FILE


class MediumConfig(BaseSettings):
    """Configuration for the Medium feed.

    All settings are loaded from environment variables with the MEDIUM_ prefix.

    :param username: Medium username whose feed is republished, with or without "@".
    :param max_posts: Maximum number of posts kept from one fetch.
    :param revalidate_seconds: How long a fetched feed is served before refetching.
    :param request_timeout: HTTP timeout in seconds for the feed request.
    :param retry_backoff_seconds: How long to wait after a failed refresh before trying again.
    """

    model_config = SettingsConfigDict(
        env_prefix="MEDIUM_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    username: str = Field(default="easyplantlife", description="Medium username")
    max_posts: int = Field(
        default=10,
        ge=1,
        le=50,
        description="Maximum number of posts to return",
    )
    revalidate_seconds: int = Field(
        default=300,
        ge=0,
        description="Seconds a fetched feed stays fresh",
    )
    request_timeout: int = Field(
        default=30,
        ge=1,
        le=120,
        description="Feed request timeout in seconds",
    )
    retry_backoff_seconds: int = Field(
        default=30,
        ge=0,
        description="Seconds to wait after a failed refresh before refetching",
    )

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Reject blank usernames.

        :param v: Raw username from environment.
        :returns: The stripped username.
        :raises ValueError: If the username is blank.
        """
        username = v.strip()
        if not username or username == "@":
            raise ValueError("Medium username must not be empty. Set MEDIUM_USERNAME.")
        return username


@lru_cache
def get_medium_config() -> MediumConfig:
    """Get cached Medium settings.

    :returns: Configured MediumConfig instance.
    """
    return MediumConfig()
