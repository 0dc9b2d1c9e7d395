"""Search service configuration."""
from pydantic_settings import SettingsConfigDict

from shared.config import BaseAppSettings


class SearchSettings(BaseAppSettings):
    model_config = SettingsConfigDict(env_prefix="SEARCH_")

    host: str = "0.0.0.0"
    port: int = 8004
    log_level: str = "INFO"
    endpoint: str = "http://localhost:9200"
    region: str = "us-west-2"
    signing_service: str = "aoss"  # "es" for managed domains
    sign_requests: bool = False
    timeout: float = 30.0
