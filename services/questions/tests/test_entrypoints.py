"""Tests for the Lambda handler and the HTTP route."""
import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

from shared.result import Failure, FailureKind, Outcome, OutcomeError
from questions import handler as questions_handler
from questions.main import create_app


def _service(outcome: Outcome) -> MagicMock:
    service = MagicMock()
    service.get_questions = AsyncMock(return_value=outcome)
    return service


RETRIEVAL_FAILURE = Failure(
    kind=FailureKind.RETRIEVAL, message="Failed to process file b.txt", path="b.txt"
)


def test_handler_returns_payload() -> None:
    service = _service(Outcome.success({"questions": ["Q"]}))
    with patch.object(questions_handler, "get_service", return_value=service):
        result = questions_handler.handler(
            {"arguments": {"localPath": ["a.txt"]}},
            SimpleNamespace(aws_request_id="req-1"),
        )
    assert result == {"questions": ["Q"]}
    service.get_questions.assert_awaited_once_with(["a.txt"])


def test_handler_raises_on_failure() -> None:
    service = _service(Outcome.failed(RETRIEVAL_FAILURE))
    with patch.object(questions_handler, "get_service", return_value=service):
        with pytest.raises(OutcomeError) as exc_info:
            questions_handler.handler({"arguments": {"localPath": ["a.txt", "b.txt"]}})
    assert exc_info.value.failure.path == "b.txt"
    assert str(exc_info.value) == "Failed to process file b.txt"


def test_handler_rejects_empty_path_list() -> None:
    service = _service(Outcome.success({}))
    with patch.object(questions_handler, "get_service", return_value=service):
        with pytest.raises(ValidationError):
            questions_handler.handler({"arguments": {"localPath": []}})
    service.get_questions.assert_not_called()


def test_route_passes_through_json() -> None:
    app = create_app()
    app.state.question_service = _service(Outcome.success([{"q": 1}]))
    client = TestClient(app)
    resp = client.post("/api/v1/questions", json={"localPath": ["a.txt"]})
    assert resp.status_code == 200
    assert resp.json() == [{"q": 1}]
    assert "X-Request-ID" in resp.headers


def test_route_failure_is_502_with_path() -> None:
    app = create_app()
    app.state.question_service = _service(Outcome.failed(RETRIEVAL_FAILURE))
    client = TestClient(app)
    resp = client.post("/api/v1/questions", json={"localPath": ["a.txt", "b.txt"]})
    assert resp.status_code == 502
    assert resp.json()["detail"] == {
        "kind": "retrieval",
        "message": "Failed to process file b.txt",
        "path": "b.txt",
    }


def test_route_rejects_empty_list() -> None:
    app = create_app()
    app.state.question_service = _service(Outcome.success({}))
    client = TestClient(app)
    resp = client.post("/api/v1/questions", json={"localPath": []})
    assert resp.status_code == 422
