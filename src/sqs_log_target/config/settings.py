"""
Module: settings.py
Description: Target configuration using pydantic-settings.

Loads the SQS log target settings from keyword arguments and
SQS_LOG_* environment variables. Settings are frozen once built.
"""

from typing import Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TargetSettings(BaseSettings):
    """SQS log target settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SQS_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True
    )

    # AWS settings
    region: str = Field(
        ...,
        min_length=1,
        description="AWS region of the destination queue"
    )
    aws_access_key: Optional[str] = Field(
        default=None,
        description="AWS access key id; ambient credentials are used when unset"
    )
    aws_secret_key: Optional[SecretStr] = Field(
        default=None,
        description="AWS secret access key"
    )

    # SQS settings
    queue_url: Optional[str] = Field(
        default=None,
        description="URL of the destination SQS queue"
    )
    max_message_size: Optional[int] = Field(
        default=None,
        description="Maximum message size override in KB"
    )
    delay_seconds: int = Field(
        default=0,
        ge=0,
        description="Delivery delay passed through to SendMessage"
    )

    # Handler settings
    log_level: str = Field(default="INFO", description="Logging level for the handler")
    diagnostic_level: str = Field(
        default="INFO",
        description="Minimum level of the target's own diagnostic output"
    )

    @field_validator('aws_access_key', 'aws_secret_key', 'queue_url', 'max_message_size', mode='before')
    @classmethod
    def empty_to_none(cls, v):
        """Treat empty strings as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('log_level', 'diagnostic_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"level must be one of: {', '.join(valid_levels)}")
        return v.upper()

    @property
    def has_credentials(self) -> bool:
        """True when either half of the credential pair is configured."""
        return self.aws_access_key is not None or self.aws_secret_key is not None
