"""Questions service entrypoint."""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from prometheus_client import make_asgi_app

from shared.logging import configure_logging
from shared.middleware import RequestIdMiddleware
from shared.schemas import HealthResponse

from questions.api.routes import router
from questions.config import QuestionsSettings
from questions.wiring import build_question_service

_settings: QuestionsSettings | None = None


def get_settings() -> QuestionsSettings:
    global _settings
    if _settings is None:
        _settings = QuestionsSettings()
    return _settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    if getattr(app.state, "question_service", None) is None:
        app.state.question_service = build_question_service(get_settings())
    yield


def create_app() -> FastAPI:
    configure_logging(json_logs=True, level=get_settings().log_level)
    app = FastAPI(title="Questions Service", version="0.1.0", lifespan=lifespan)
    app.add_middleware(RequestIdMiddleware)

    app.include_router(router)

    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    @app.get("/healthz", response_model=HealthResponse)
    async def healthz() -> HealthResponse:
        return HealthResponse(status="ok", service="questions")

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "questions.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )
