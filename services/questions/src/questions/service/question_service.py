"""Question service: presign -> fetch -> encode each path, then one generation call."""
from typing import Any

import structlog

from shared.result import Failure, FailureKind, Outcome
from questions.api.schemas import FileQueryPayload
from questions.clients import ObjectStorage, QuestionGenerationClient
from questions.prompts import PLACEHOLDER_FILENAME, STUDY_QUESTIONS_PROMPT
from questions.service.encoding import encode_content, join_batch

log = structlog.get_logger()

GENERATION_FAILED = "Failed to generate questions"


class QuestionService:
    def __init__(
        self,
        storage: ObjectStorage,
        generation_client: QuestionGenerationClient,
        prompt: str = STUDY_QUESTIONS_PROMPT,
        filename: str = PLACEHOLDER_FILENAME,
        separator: str = ",",
    ) -> None:
        self._storage = storage
        self._generation_client = generation_client
        self._prompt = prompt
        self._filename = filename
        self._separator = separator

    async def encode_path(self, path: str) -> str:
        url = self._storage.presign_get(path)
        text = await self._storage.fetch_text(url)
        return encode_content(text)

    async def get_questions(self, paths: list[str]) -> Outcome[Any]:
        batch: list[str] = []
        # The first failing path stops the whole call.
        for path in paths:
            try:
                batch.append(await self.encode_path(path))
            except Exception as e:
                log.error("file_processing_failed", path=path, error=repr(e))
                return Outcome.failed(
                    Failure(
                        kind=FailureKind.RETRIEVAL,
                        message=f"Failed to process file {path}",
                        path=path,
                    )
                )

        payload = FileQueryPayload(
            prompt=self._prompt,
            filename=self._filename,
            file_content_base64=join_batch(batch, self._separator),
        )
        try:
            data = await self._generation_client.generate(payload)
        except Exception as e:
            status_code = getattr(getattr(e, "response", None), "status_code", None)
            log.error(
                "question_generation_failed",
                error=repr(e),
                status_code=status_code,
                files=len(batch),
            )
            return Outcome.failed(
                Failure(
                    kind=FailureKind.GENERATION,
                    message=GENERATION_FAILED,
                    status_code=status_code,
                )
            )
        log.info("questions_generated", files=len(batch))
        return Outcome.success(data)
