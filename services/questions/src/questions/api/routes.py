"""Questions API routes."""
from typing import Any

from fastapi import APIRouter, HTTPException, Request

from questions.api.schemas import GetQuestionsRequest
from questions.service import QuestionService

router = APIRouter(prefix="/api/v1", tags=["questions"])


@router.post("/questions")
async def get_questions(body: GetQuestionsRequest, request: Request) -> Any:
    service: QuestionService = request.app.state.question_service
    outcome = await service.get_questions(body.local_path)
    if not outcome.ok:
        raise HTTPException(status_code=502, detail=outcome.failure.as_dict())
    return outcome.value
