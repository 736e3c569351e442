"""
app/core/config.py

Purpose: Application configuration

- Loads environment variables (and .env)
- Centralizes config values (Mongo URI, SMTP credentials, CORS, port)
- Validates configuration on startup
- Environment-specific settings
"""

from pydantic import Field, field_validator, ValidationInfo
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, Literal, List


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Validates all required configs on startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"

    # MongoDB
    MONGO_URI: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection URI"
    )
    MONGODB_DB_NAME: str = Field(
        default="Men",
        description="MongoDB database name"
    )

    # Mail relay
    SMTP_HOST: str = Field(
        default="smtpout.secureserver.net",
        description="Outbound SMTP relay host"
    )
    SMTP_PORT: int = Field(
        default=465,
        description="Outbound SMTP relay port"
    )
    SMTP_USE_TLS: bool = Field(
        default=True,
        description="Use implicit TLS when connecting to the relay"
    )
    SMTP_USER: Optional[str] = Field(
        default=None,
        description="SMTP login"
    )
    SMTP_PASS: Optional[str] = Field(
        default=None,
        validate_default=True,
        description="SMTP password"
    )
    SMTP_TIMEOUT: float = Field(
        default=10.0,
        description="Connection, greeting and socket timeout in seconds"
    )
    SUPPORT_EMAIL: str = Field(
        default="support@vastrafusion.com",
        description="Mailbox receiving contact form submissions"
    )

    # Application
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    HOST: str = Field(
        default="0.0.0.0",
        description="Interface uvicorn binds to"
    )
    PORT: int = Field(
        default=8000,
        description="Listening port"
    )
    API_PREFIX: str = Field(
        default="/api",
        description="API route prefix"
    )

    # CORS (single storefront origin)
    CORS_ORIGIN: str = Field(
        default="https://vastrafusion.com",
        description="The one origin allowed to call the API"
    )
    CORS_METHODS: List[str] = Field(
        default=["GET", "POST", "PUT", "PATCH", "DELETE"],
        description="Allowed CORS methods"
    )
    CORS_HEADERS: List[str] = Field(
        default=["Content-Type", "Authorization"],
        description="Allowed CORS request headers"
    )

    @field_validator("CORS_ORIGIN")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Browsers send the origin without a trailing slash."""
        return v.rstrip("/")

    @field_validator("SMTP_PASS")
    @classmethod
    def validate_smtp_credentials(cls, v, info: ValidationInfo):
        """Ensure mail credentials are set in production."""
        if info.data.get("ENVIRONMENT") == "production" and not v:
            raise ValueError("SMTP_PASS is required in production environment")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


# Global settings instance
settings = Settings()


def validate_settings(config: Optional[Settings] = None):
    """
    Validates critical settings on application startup.
    Raises ValueError if any required setting is missing or invalid.
    """
    config = config or settings
    errors = []

    if not config.MONGO_URI:
        errors.append("MONGO_URI is required")

    if not config.SUPPORT_EMAIL:
        errors.append("SUPPORT_EMAIL is required")

    # Production-specific validations
    if config.is_production:
        if not config.SMTP_USER:
            errors.append("SMTP_USER is required in production")
        if not config.SMTP_PASS:
            errors.append("SMTP_PASS is required in production")

    if errors:
        raise ValueError(f"Configuration validation failed: {', '.join(errors)}")

    return True
