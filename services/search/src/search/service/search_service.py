"""Search service: resolver request -> backend -> resolver response."""
from typing import Any

import structlog

from shared.result import Failure, FailureKind, Outcome
from search import resolver
from search.clients import OpenSearchClient

log = structlog.get_logger()


class SearchService:
    def __init__(self, client: OpenSearchClient) -> None:
        self._client = client

    async def search(self, title: str) -> Outcome[list[Any]]:
        envelope = resolver.request({"arguments": {"title": title}})
        try:
            result = await self._client.execute(envelope)
        except Exception as e:
            log.error("search_backend_unreachable", title=title, error=repr(e))
            return Outcome.failed(
                Failure(kind=FailureKind.SEARCH, message="Search backend request failed")
            )
        documents = resolver.response({"result": result.as_resolver_result()})
        if documents is None:
            log.error("search_backend_error", title=title, status_code=result.status_code)
            return Outcome.failed(
                Failure(
                    kind=FailureKind.SEARCH,
                    message=f"Search backend returned status {result.status_code}",
                    status_code=result.status_code,
                )
            )
        return Outcome.success(documents)
