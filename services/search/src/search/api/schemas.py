"""API request/response schemas."""
from typing import Any

from pydantic import BaseModel


class SearchRequest(BaseModel):
    title: str


class SearchResponse(BaseModel):
    results: list[Any]
