"""Lambda-style entry: event["arguments"]["localPath"] -> generation endpoint JSON."""
import asyncio
from typing import Any

from shared.logging import clear_request_context, configure_logging, set_lambda_request_context
from questions.api.schemas import GetQuestionsRequest
from questions.config import QuestionsSettings
from questions.service import QuestionService
from questions.wiring import build_question_service

_service: QuestionService | None = None


def get_service() -> QuestionService:
    global _service
    if _service is None:
        settings = QuestionsSettings()
        configure_logging(json_logs=True, level=settings.log_level)
        _service = build_question_service(settings)
    return _service


def handler(event: dict[str, Any], context: Any = None) -> Any:
    """Raises OutcomeError on failure so the invoking runtime records an error."""
    set_lambda_request_context(context)
    try:
        body = GetQuestionsRequest.model_validate(event.get("arguments") or {})
        outcome = asyncio.run(get_service().get_questions(body.local_path))
        return outcome.unwrap()
    finally:
        clear_request_context()
