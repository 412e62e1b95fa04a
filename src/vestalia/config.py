"""Configuration models using Pydantic for type safety and validation."""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, SecretStr, field_validator

from .constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT


class VestaboardConfig(BaseModel):
    """Vestaboard Platform API configuration."""

    api_key: SecretStr = Field(..., description="Installable API key")
    api_secret: SecretStr = Field(..., description="Installable API secret")
    subscription_id: Optional[str] = Field(
        None, description="Subscription id (first subscription is used if empty)"
    )
    base_url: str = Field(DEFAULT_BASE_URL, description="Platform API root URL")
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0, description="Request timeout in seconds")

    @field_validator('api_key', 'api_secret')
    @classmethod
    def validate_not_empty(cls, v: SecretStr) -> SecretStr:
        """Validate that the key pair values are not blank."""
        if not v.get_secret_value().strip():
            raise ValueError("API key and secret must not be empty")
        return v

    @field_validator('subscription_id')
    @classmethod
    def empty_subscription_to_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat a blank subscription id as not configured."""
        if v is not None and not v.strip():
            return None
        return v


class AppConfig(BaseModel):
    """Main application configuration."""

    vestaboard: VestaboardConfig = Field(..., description="Vestaboard configuration")
    log_level: str = Field("INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid Python logging level."""
        valid_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        v_upper = v.upper().strip()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log_level: '{v}'. Valid options: {', '.join(sorted(valid_levels))}")
        return v_upper

    @classmethod
    def from_env(cls) -> 'AppConfig':
        """Load configuration from environment variables (and a .env file)."""
        load_dotenv()

        vestaboard_config = VestaboardConfig(
            api_key=os.getenv("VESTABOARD_API_KEY", ""),
            api_secret=os.getenv("VESTABOARD_API_SECRET", ""),
            subscription_id=os.getenv("VESTABOARD_SUBSCRIPTION_ID"),
            base_url=os.getenv("VESTABOARD_BASE_URL", DEFAULT_BASE_URL),
            timeout=float(os.getenv("VESTABOARD_TIMEOUT", str(DEFAULT_TIMEOUT))),
        )

        return cls(
            vestaboard=vestaboard_config,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
