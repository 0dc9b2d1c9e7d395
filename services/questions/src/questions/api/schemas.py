"""API request/response schemas."""
from pydantic import BaseModel, ConfigDict, Field


class GetQuestionsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    local_path: list[str] = Field(..., min_length=1, alias="localPath")


class FileQueryPayload(BaseModel):
    """Body POSTed to /filequery."""

    prompt: str
    filename: str
    file_content_base64: str
