"""Questions service configuration."""
from pydantic_settings import SettingsConfigDict

from shared.config import BaseAppSettings
from questions.prompts import PLACEHOLDER_FILENAME, STUDY_QUESTIONS_PROMPT


class QuestionsSettings(BaseAppSettings):
    model_config = SettingsConfigDict(env_prefix="QUESTIONS_")

    host: str = "0.0.0.0"
    port: int = 8003
    log_level: str = "INFO"
    bucket: str = "amplify-amplifyvitereactt-amplifyteamdrivebucket28-2j1zgywqwfjv"
    region: str = "us-west-2"
    presign_expires_seconds: int = 3600
    fetch_timeout: float = 30.0
    generation_url: str = "https://qkhr2j5d52.execute-api.us-west-2.amazonaws.com/filequery"
    generation_timeout: float = 120.0
    generation_max_attempts: int = 1  # no retries
    prompt: str = STUDY_QUESTIONS_PROMPT
    placeholder_filename: str = PLACEHOLDER_FILENAME
    content_separator: str = ","
