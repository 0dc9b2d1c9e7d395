"""HTTP client factory and request helper with optional tenacity retries."""
from typing import Any

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)


def create_http_client(
    timeout: float = 30.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create async HTTP client with timeout and no transport-level retries."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        transport=transport or httpx.AsyncHTTPTransport(retries=0),
    )


async def request_with_retries(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    json: Any = None,
    headers: dict[str, str] | None = None,
    attempts: int = 1,
) -> httpx.Response:
    """Perform request, raising on non-2xx. attempts=1 means a single try."""

    @retry(
        retry=retry_if_exception_type((httpx.TransportError, httpx.HTTPStatusError)),
        stop=stop_after_attempt(max(attempts, 1)),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    async def _do() -> httpx.Response:
        resp = await client.request(method, url, json=json, headers=headers)
        resp.raise_for_status()
        return resp

    return await _do()
