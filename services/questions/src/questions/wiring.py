"""Build a QuestionService from settings."""
from shared.config import AwsCredentials
from questions.clients import ObjectStorage, QuestionGenerationClient
from questions.config import QuestionsSettings
from questions.service import QuestionService


def build_question_service(
    settings: QuestionsSettings,
    credentials: AwsCredentials | None = None,
) -> QuestionService:
    storage = ObjectStorage(
        bucket=settings.bucket,
        region=settings.region,
        credentials=credentials,
        expires_in=settings.presign_expires_seconds,
        timeout=settings.fetch_timeout,
    )
    generation_client = QuestionGenerationClient(
        settings.generation_url,
        timeout=settings.generation_timeout,
        max_attempts=settings.generation_max_attempts,
    )
    return QuestionService(
        storage=storage,
        generation_client=generation_client,
        prompt=settings.prompt,
        filename=settings.placeholder_filename,
        separator=settings.content_separator,
    )
