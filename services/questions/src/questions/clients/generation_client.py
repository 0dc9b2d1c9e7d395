"""HTTP client for the remote question-generation endpoint."""
from typing import Any

import httpx

from shared.http_client import create_http_client, request_with_retries
from questions.api.schemas import FileQueryPayload


class QuestionGenerationClient:
    def __init__(
        self,
        url: str,
        timeout: float = 120.0,
        max_attempts: int = 1,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._transport = transport

    async def generate(self, payload: FileQueryPayload) -> Any:
        async with create_http_client(self._timeout, self._transport) as client:
            resp = await request_with_retries(
                client,
                "POST",
                self._url,
                json=payload.model_dump(),
                headers={"Content-Type": "application/json"},
                attempts=self._max_attempts,
            )
        return resp.json()
