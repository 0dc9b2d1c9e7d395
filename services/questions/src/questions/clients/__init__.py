from questions.clients.generation_client import QuestionGenerationClient
from questions.clients.storage_client import ObjectStorage

__all__ = ["ObjectStorage", "QuestionGenerationClient"]
