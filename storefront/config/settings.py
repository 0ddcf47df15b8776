from datetime import timedelta

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings backed by Pydantic BaseSettings.
    Values are read from environment variables and an optional .env file.
    """

    PROJECT_NAME: str = "Storefront Core"
    VERSION: str = "0.1.0"

    # Application Settings
    DEBUG: bool = Field(False, description="Debug mode")
    ENVIRONMENT: str = Field("production", description="Runtime environment")

    # Logging
    LOG_LEVEL: str = Field("INFO", description="Root log level")
    LOG_FORMAT: str = Field("colored", description="Console log format: colored, json or plain")
    LOG_FILE: str | None = Field(None, description="Optional JSON log file path")

    # Authentication / lockout
    LOGIN_MAX_ATTEMPTS: int = Field(5, description="Consecutive failed logins before the account is locked")
    LOGIN_LOCKOUT_MINUTES: int = Field(120, description="How long a locked account stays locked")
    BCRYPT_ROUNDS: int = Field(12, description="bcrypt cost factor for password hashing")

    # Store-manager onboarding
    STORE_PLACEHOLDER: str = Field("TBD", description="Store name/address used when none was supplied")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        level = str(v).upper()
        if level not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError(f"Invalid LOG_LEVEL: {v}")
        return level

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v):
        if v not in ["colored", "json", "plain"]:
            raise ValueError("LOG_FORMAT must be one of: colored, json, plain")
        return v

    @field_validator("LOGIN_MAX_ATTEMPTS", "LOGIN_LOCKOUT_MINUTES")
    @classmethod
    def validate_positive(cls, v):
        if v < 1:
            raise ValueError("Login limits must be at least 1")
        return v

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v):
        # bcrypt accepts cost factors 4..31
        if not 4 <= v <= 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")
        return v

    @computed_field
    @property
    def is_development(self) -> bool:
        return self.DEBUG or self.ENVIRONMENT.lower() in ["development", "dev", "local", "test"]

    @property
    def login_lockout_duration(self) -> timedelta:
        return timedelta(minutes=self.LOGIN_LOCKOUT_MINUTES)


# Settings singleton
_settings_instance = None


def get_settings() -> Settings:
    """
    Return the cached settings instance.
    Avoids re-reading the environment on every call.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
