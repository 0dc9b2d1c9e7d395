"""Resolver pair: title -> search request envelope, search response -> documents."""
import json
from typing import Any, Mapping

RESOLVER_VERSION = "2018-05-29"
SEARCH_PATH = "/movie/_search"
PAGE_FROM = 0
PAGE_SIZE = 50


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def build_query_body(title: Any) -> dict[str, Any]:
    return {
        "from": PAGE_FROM,
        "size": PAGE_SIZE,
        "query": {"match": {"title": title}},
    }


def request(ctx: Any) -> dict[str, Any]:
    """Envelope for GET /movie/_search matching ctx.arguments.title."""
    arguments = _field(ctx, "arguments") or _field(ctx, "args") or {}
    title = _field(arguments, "title")
    return {
        "version": RESOLVER_VERSION,
        "method": "GET",
        "params": {
            "headers": {"Content-Type": "application/json"},
            "body": build_query_body(title),
        },
        "resourcePath": SEARCH_PATH,
    }


def response(ctx: Any) -> list[Any] | None:
    """The _source of each hit on status 200; None for any other status."""
    result = _field(ctx, "result") or {}
    if _field(result, "statusCode") != 200:
        return None
    body = _field(result, "body")
    data = json.loads(body) if isinstance(body, (str, bytes)) else body
    return [hit["_source"] for hit in data["hits"]["hits"]]
