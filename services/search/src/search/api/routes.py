"""Search API routes."""
from fastapi import APIRouter, HTTPException, Request

from search.api.schemas import SearchRequest, SearchResponse
from search.service import SearchService

router = APIRouter(prefix="/api/v1", tags=["search"])


@router.post("/search", response_model=SearchResponse)
async def search(body: SearchRequest, request: Request) -> SearchResponse:
    service: SearchService = request.app.state.search_service
    outcome = await service.search(body.title)
    if not outcome.ok:
        raise HTTPException(status_code=502, detail=outcome.failure.as_dict())
    return SearchResponse(results=outcome.value)
