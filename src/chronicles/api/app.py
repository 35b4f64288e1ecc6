"""FastAPI application exposing journal search and lookup.

Routes:
    GET  /search?journal=<root>                 list a journal's dates
    GET  /findByDate/{entryDate}?journal=<root> render one entry
    POST /save                                  validate a save (no write yet)
    GET  /healthz                               liveness
"""

from __future__ import annotations

import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from chronicles import __version__
from chronicles.core.config import Config, get_config
from chronicles.core.exceptions import (
    ChroniclesError,
    DocumentNotFoundError,
    InvalidQueryError,
)
from chronicles.journal import IndexRegistry
from chronicles.journal.paths import extract_date_token

from .schemas import DocumentResponse, ErrorResponse, SaveRequest, SaveResponse, SearchResponse

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Accept", "Authorization", "Content-Type", "X-CSRF-Token"]


def _require_journal(journal: str | None) -> str:
    if not journal or not journal.strip():
        raise InvalidQueryError("journal is required")
    return journal


def create_app(config: Config | None = None, registry: IndexRegistry | None = None) -> FastAPI:
    """Build the API app.

    Args:
        config: Application config; the global one is used if omitted.
        registry: Index registry to serve from; built from ``config`` if omitted.
    """
    if config is None:
        config = get_config()
    settings = config.validated()
    if registry is None:
        registry = IndexRegistry(settings.journal)
    debug = settings.server.debug

    app = FastAPI(
        title="Chronicles API",
        version=__version__,
        description="Search and render a journal of dated markdown files",
    )
    app.state.registry = registry

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
        expose_headers=["Link"],
        allow_credentials=True,
        max_age=300,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
        return response

    @app.exception_handler(InvalidQueryError)
    async def handle_invalid_query(request: Request, exc: InvalidQueryError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"message": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def handle_bad_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        problems = "; ".join(f"{'.'.join(str(p) for p in err['loc'][1:])}: {err['msg']}" for err in exc.errors())
        return JSONResponse(status_code=400, content={"message": f"Invalid request: {problems}"})

    @app.exception_handler(DocumentNotFoundError)
    async def handle_not_found(request: Request, exc: DocumentNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"message": str(exc) or "Entry not found"})

    @app.exception_handler(ChroniclesError)
    async def handle_internal(request: Request, exc: ChroniclesError) -> JSONResponse:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
        message = f"Internal error: {exc}" if debug else "Internal error"
        return JSONResponse(status_code=500, content={"message": message})

    @app.get("/healthz")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/search", response_model=SearchResponse, responses={400: {"model": ErrorResponse}})
    def search(journal: str | None = None) -> SearchResponse:
        index = registry.get(_require_journal(journal))
        return SearchResponse(**index.search().to_dict())

    @app.get(
        "/findByDate/{entry_date}",
        response_model=DocumentResponse,
        responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    )
    def find_by_date(entry_date: str, journal: str | None = None) -> DocumentResponse:
        root = _require_journal(journal)
        if extract_date_token(entry_date) is None:
            raise InvalidQueryError("entry date must contain a YYYY-MM-DD date")

        doc = registry.get(root).find_by_date(entry_date)
        if doc is None:
            raise DocumentNotFoundError("Entry not found")
        return DocumentResponse(**doc.to_dict())

    @app.post("/save", status_code=202, response_model=SaveResponse, responses={400: {"model": ErrorResponse}})
    def save(request: SaveRequest) -> SaveResponse:
        root = _require_journal(request.journal)
        path = registry.get(root).save(request.date, request.content)
        return SaveResponse(journal=root, date=request.date, path=str(path))

    return app
