"""Lambda resolver entry: event["arguments"]["title"] -> list of documents."""
import asyncio
from typing import Any

from shared.logging import clear_request_context, configure_logging, set_lambda_request_context
from search.config import SearchSettings
from search.service import SearchService
from search.wiring import build_search_service

_service: SearchService | None = None


def get_service() -> SearchService:
    global _service
    if _service is None:
        settings = SearchSettings()
        configure_logging(json_logs=True, level=settings.log_level)
        _service = build_search_service(settings)
    return _service


def handler(event: dict[str, Any], context: Any = None) -> list[Any]:
    """Raises OutcomeError when the backend does not answer 200."""
    set_lambda_request_context(context)
    try:
        title = (event.get("arguments") or {})["title"]
        return asyncio.run(get_service().search(title)).unwrap()
    finally:
        clear_request_context()
