"""End-to-end: real presigning, mocked S3 and generation endpoint over one transport."""
import json
from typing import Callable

import httpx
import pytest

from shared.config import AwsCredentials
from shared.result import FailureKind
from questions.clients import ObjectStorage, QuestionGenerationClient
from questions.service import QuestionService
from questions.service.question_service import GENERATION_FAILED

CREDENTIALS = AwsCredentials(access_key_id="AKIDEXAMPLE", secret_access_key="secret")
GENERATION_URL = "https://gen.example.test/filequery"


def _questions_reply(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"questions": ["Q"]})


def _build(
    objects: dict[str, bytes | str],
    sent: list[dict],
    generation: Callable[[httpx.Request], httpx.Response] = _questions_reply,
) -> QuestionService:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "gen.example.test":
            sent.append(json.loads(request.content))
            return generation(request)
        key = request.url.path.rsplit("/", 1)[-1]
        if key not in objects:
            return httpx.Response(404, text="NoSuchKey")
        return httpx.Response(200, content=objects[key])

    transport = httpx.MockTransport(handler)
    storage = ObjectStorage(bucket="study-files", credentials=CREDENTIALS, transport=transport)
    generation_client = QuestionGenerationClient(GENERATION_URL, transport=transport)
    return QuestionService(storage, generation_client)


@pytest.mark.asyncio
async def test_two_files_joined_literally() -> None:
    sent: list[dict] = []
    service = _build({"a.txt": "X", "b.txt": "Y"}, sent)
    outcome = await service.get_questions(["a.txt", "b.txt"])

    assert outcome.value == {"questions": ["Q"]}
    assert len(sent) == 1
    assert sent[0]["file_content_base64"] == "WA==,WQ=="
    assert sent[0]["filename"] == "something.txt"


@pytest.mark.asyncio
async def test_byte_order_mark_is_not_encoded() -> None:
    sent: list[dict] = []
    service = _build({"a.txt": b"\xef\xbb\xbfX"}, sent)
    outcome = await service.get_questions(["a.txt"])

    assert outcome.ok
    assert sent[0]["file_content_base64"] == "WA=="


@pytest.mark.asyncio
async def test_missing_object_stops_before_endpoint() -> None:
    sent: list[dict] = []
    service = _build({"a.txt": "X"}, sent)
    outcome = await service.get_questions(["a.txt", "missing.txt", "a.txt"])

    assert outcome.failure.kind == FailureKind.RETRIEVAL
    assert outcome.failure.path == "missing.txt"
    assert sent == []


@pytest.mark.asyncio
async def test_non_json_reply_is_generation_failure() -> None:
    sent: list[dict] = []
    service = _build(
        {"a.txt": "X"}, sent, generation=lambda r: httpx.Response(200, text="<html>")
    )
    outcome = await service.get_questions(["a.txt"])

    assert not outcome.ok
    assert outcome.failure.kind == FailureKind.GENERATION
    assert outcome.failure.message == GENERATION_FAILED
    assert len(sent) == 1


@pytest.mark.asyncio
async def test_unreachable_endpoint_is_generation_failure() -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    sent: list[dict] = []
    service = _build({"a.txt": "X"}, sent, generation=refuse)
    outcome = await service.get_questions(["a.txt"])

    assert outcome.failure.kind == FailureKind.GENERATION
    assert outcome.failure.message == GENERATION_FAILED
    assert outcome.failure.status_code is None
