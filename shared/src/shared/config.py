"""Base configuration and env handling."""
from pydantic import BaseModel, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseAppSettings(BaseSettings):
    """Base settings with common env config."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


class AwsCredentials(BaseModel):
    """Explicit AWS credentials passed to clients at construction time."""

    access_key_id: str
    secret_access_key: SecretStr
    session_token: SecretStr | None = None
