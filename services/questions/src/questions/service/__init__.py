from questions.service.question_service import QuestionService

__all__ = ["QuestionService"]
