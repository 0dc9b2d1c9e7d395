"""Search service entrypoint."""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from prometheus_client import make_asgi_app

from shared.logging import configure_logging
from shared.middleware import RequestIdMiddleware
from shared.schemas import HealthResponse

from search.api.routes import router
from search.config import SearchSettings
from search.wiring import build_search_service

_settings: SearchSettings | None = None


def get_settings() -> SearchSettings:
    global _settings
    if _settings is None:
        _settings = SearchSettings()
    return _settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    if getattr(app.state, "search_service", None) is None:
        app.state.search_service = build_search_service(get_settings())
    yield


def create_app() -> FastAPI:
    configure_logging(json_logs=True, level=get_settings().log_level)
    app = FastAPI(title="Search Service", version="0.1.0", lifespan=lifespan)
    app.add_middleware(RequestIdMiddleware)

    app.include_router(router)

    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    @app.get("/healthz", response_model=HealthResponse)
    async def healthz() -> HealthResponse:
        return HealthResponse(status="ok", service="search")

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "search.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )
