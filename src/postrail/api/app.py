"""FastAPI application factory.

Routes are thin: parse the raw request, call the repository, and hand
the Outcome to the responder. Repository calls block on SQLite, so they
run in the threadpool, never on the event loop. No route raises
HTTPException; every status code comes from :func:`postrail.output.responder.respond`.
"""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import structlog
from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from postrail import __version__
from postrail.config.settings import PostrailSettings
from postrail.infrastructure.database.engine import init_database
from postrail.infrastructure.repositories.posts import PostStore
from postrail.output.responder import Response, respond
from postrail.services.posts import PostsRepository

logger = structlog.get_logger(__name__)

router = APIRouter()


def _to_json_response(response: Response) -> JSONResponse:
    return JSONResponse(status_code=response.status, content=response.body)


def _repository(request: Request) -> PostsRepository:
    return request.app.state.repository


async def _read_params(request: Request) -> dict[str, Any]:
    """Return the JSON body as a raw mapping; anything else counts as empty."""
    raw = await request.body()
    if not raw:
        return {}
    try:
        params = json.loads(raw)
    except ValueError:
        logger.info("request.malformed_body", path=request.url.path)
        return {}
    return params if isinstance(params, dict) else {}


# -------------------------------------------------------------------------
# Endpoints
# -------------------------------------------------------------------------


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


@router.post("/posts")
async def create_post(request: Request) -> JSONResponse:
    """Create a post from ``{"title": ..., "rating": ...}``."""
    params = await _read_params(request)
    outcome = await run_in_threadpool(_repository(request).create_from_params, params)
    return _to_json_response(respond(outcome))


@router.get("/posts")
def list_posts(request: Request) -> JSONResponse:
    outcome = _repository(request).find_all()
    return _to_json_response(respond(outcome))


@router.get("/posts/{post_id}")
def show_post(post_id: str, request: Request) -> JSONResponse:
    outcome = _repository(request).find_by_id(post_id)
    return _to_json_response(respond(outcome))


# -------------------------------------------------------------------------
# Factory
# -------------------------------------------------------------------------


def create_app(
    settings: PostrailSettings | None = None,
    repository: PostsRepository | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Without *settings*, configuration is discovered the same way the CLI
    does it (walk-up ``postrail.toml``, then ``POSTRAIL_*`` env vars), so
    ``uvicorn --factory postrail.api:create_app`` honours the project file.
    When *repository* is None, the database named by *settings* is
    initialized at startup and disposed at shutdown.
    """
    resolved = settings or PostrailSettings.from_cli()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        engine = None
        if repository is None:
            engine = init_database(resolved.database_path)
            app.state.repository = PostsRepository(PostStore(engine))
        logger.info("api.starting", database=str(resolved.database_path))
        try:
            yield
        finally:
            logger.info("api.stopping")
            if engine is not None:
                engine.dispose()

    app = FastAPI(
        title="postrail",
        description="Post resource behind a railway-oriented outcome pipeline",
        version=__version__,
        lifespan=lifespan,
    )
    if repository is not None:
        app.state.repository = repository
    app.include_router(router, tags=["Posts"])
    return app
