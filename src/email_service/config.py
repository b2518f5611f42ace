"""Configuration for the email service using pydantic-settings."""

from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.paths import ENV_FILE

DEFAULT_FROM_ADDRESS = "Easy Plant Life <hello@easyplantlife.com>"
DEFAULT_CONTACT_EMAIL = "hello@easyplantlife.com"


class ConfigValidation(BaseModel):
    """Result of validating the email configuration."""

    valid: bool
    error: str | None = None


class EmailConfig(BaseSettings):
    """Configuration for the Resend email integration.

    :param api_key: Resend API key. Unset means the service is not configured.
    :param audience_id: Resend audience that newsletter contacts are added to.
    :param from_address: Sender used when a message does not specify one.
    :param contact_email: Site owner address that receives contact form messages.
    """

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    api_key: str | None = Field(
        default=None,
        validation_alias="RESEND_API_KEY",
        description="Resend API key",
    )
    audience_id: str = Field(
        default="",
        validation_alias="RESEND_AUDIENCE_ID",
        description="Resend audience ID for newsletter subscribers",
    )
    from_address: str = Field(
        default=DEFAULT_FROM_ADDRESS,
        validation_alias="EMAIL_FROM_ADDRESS",
        description="Default sender address",
    )
    contact_email: str = Field(
        default=DEFAULT_CONTACT_EMAIL,
        validation_alias="CONTACT_EMAIL",
        description="Recipient of contact form submissions",
    )

    @property
    def is_configured(self) -> bool:
        """Whether a non-blank Resend API key is set."""
        return bool(self.api_key and self.api_key.strip())

    def validate_config(self) -> ConfigValidation:
        """Check that the configuration is usable.

        :returns: Validation result with an error message when invalid.
        """
        if not self.is_configured:
            return ConfigValidation(
                valid=False,
                error="RESEND_API_KEY environment variable is not set",
            )
        return ConfigValidation(valid=True)


@lru_cache
def get_email_config() -> EmailConfig:
    """Get cached email settings.

    Settings are loaded once and cached for the lifetime of the process.

    :returns: Configured EmailConfig instance.
    """
    return EmailConfig()
