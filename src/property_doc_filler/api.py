"""FastAPI application for the property document filler."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncIterator, Optional, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .config import Config, ensure_directories
from .errors import DocumentFillerError, ValidationError
from .filler import STATIC_PREFIX, generate
from .placements import OVERLAY_PLACEMENTS, FieldMapping, load_field_mappings
from .schemas import (
    DocumentRequest,
    ErrorResponse,
    GenerateResponse,
    HealthResponse,
    RootResponse,
)

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[Config] = None,
    placements: Optional[Sequence[FieldMapping]] = None,
) -> FastAPI:
    """
    Build the application.

    Directories are created here, once, before the static mount needs them.
    """
    config = config or Config()
    config.validate()
    paths = config.paths()
    ensure_directories(paths)

    if placements is None:
        placements = (
            load_field_mappings(config.OVERLAY_MAPPING_PATH)
            if config.OVERLAY_MAPPING_PATH
            else OVERLAY_PLACEMENTS
        )

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        logger.info("Server running on port %s", config.PORT)
        logger.info("Health check: %s/health", config.PUBLIC_BASE_URL)
        logger.info("Document generation: %s/generate-document", config.PUBLIC_BASE_URL)
        logger.debug("Template: %s", paths.template)
        yield

    app = FastAPI(title="Property Document Filler", version="1.0.0", lifespan=lifespan)
    app.state.config = config
    app.state.paths = paths
    app.state.placements = placements

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(DocumentFillerError)
    async def document_error_handler(_: Request, exc: DocumentFillerError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
        logger.debug("Rejected request body: %s", exc.errors())
        error = ValidationError()
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.get("/")
    def root() -> dict:
        timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
        return RootResponse(timestamp=timestamp.replace("+00:00", "Z")).as_payload()

    @app.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse()

    @app.post(
        "/generate-document",
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    def generate_document(request: DocumentRequest) -> dict:
        reference = generate(
            request.model_dump(by_alias=True),
            paths=app.state.paths,
            base_url=config.PUBLIC_BASE_URL,
            placements=app.state.placements,
        )
        response = GenerateResponse(download_url=reference.download_url, filename=reference.filename)
        return response.model_dump(by_alias=True)

    app.mount(STATIC_PREFIX, StaticFiles(directory=paths.generated_dir), name="generated")
    return app
