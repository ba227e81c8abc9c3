"""FastAPI application entrypoint."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from jeopardy.api.middleware import RequestIDMiddleware, RequestLoggingMiddleware
from jeopardy.api.router import api_router
from jeopardy.config import settings
from jeopardy.services.game import GameController
from jeopardy.services.trivia import TriviaClient

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"

# Initialize Sentry for error tracking
if settings.sentry_dsn:
    import sentry_sdk

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.environment,
        traces_sample_rate=0.1 if settings.is_production else 1.0,
    )
    logger.info("Sentry initialized")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    client = TriviaClient()
    app.state.game = GameController(client)
    logger.info(f"Using trivia source {client.base_url}")
    yield
    # Shutdown
    await client.close()


app = FastAPI(
    title="Jeopardy API",
    description="Trivia board backed by a jService-compatible API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/api/docs" if settings.debug_enabled else None,
    redoc_url="/api/redoc" if settings.debug_enabled else None,
    openapi_url="/api/openapi.json" if settings.debug_enabled else None,
)

if settings.debug_enabled:
    app.add_middleware(RequestLoggingMiddleware)  # type: ignore[arg-type]

# Added last so it wraps the logging middleware and the ID is set first
app.add_middleware(RequestIDMiddleware)  # type: ignore[arg-type]

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Accept", "X-Request-ID"],
    expose_headers=["X-Request-ID"],
)

app.include_router(api_router, prefix="/api")

app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


@app.get("/", include_in_schema=False)
async def index():
    """Serve the board page."""
    return FileResponse(STATIC_DIR / "index.html")


if __name__ == "__main__":
    import uvicorn

    from jeopardy.logging import get_uvicorn_log_config

    uvicorn.run(
        "jeopardy.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
        log_config=get_uvicorn_log_config(),
    )
