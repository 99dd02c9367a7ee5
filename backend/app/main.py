"""Universal Links Test FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from app import __version__
from app.config import settings
from app.exceptions import FileStoreError
from app.schemas.files import ErrorResponse

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def _lifespan(app: FastAPI):
    """Startup / shutdown lifecycle."""
    _setup_logging()

    Path(settings.files_dir).mkdir(parents=True, exist_ok=True)
    logger.info(
        "%s v%s started, listening on %s:%s, serving %s at %s",
        settings.app_name, __version__, settings.host, settings.port,
        settings.files_dir, settings.files_url_prefix,
    )

    try:
        yield
    finally:
        logger.info("%s shutting down", settings.app_name)


def _setup_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("multipart").setLevel(logging.WARNING)


def _register_exception_handlers(app: FastAPI) -> None:
    upload_path = f"{settings.api_prefix}/files"

    @app.exception_handler(FileStoreError)
    async def _file_store_error(request: Request, exc: FileStoreError):
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=exc.message).model_dump(),
        )

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError):
        # A "file" field that is not a file upload counts as no file at all
        if request.method == "POST" and request.url.path == upload_path:
            return JSONResponse(
                status_code=400,
                content=ErrorResponse(error="No file provided").model_dump(),
            )
        return await request_validation_exception_handler(request, exc)


def create_app() -> FastAPI:
    """Application factory."""
    from app.api.routes import api_router

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        debug=settings.debug,
        lifespan=_lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)

    # Mount API routes
    app.include_router(api_router, prefix=settings.api_prefix)

    # Uploaded files, reachable by direct URL
    app.mount(
        settings.files_mount_path,
        StaticFiles(directory=settings.files_dir, check_dir=False),
        name="files",
    )

    # Upload page
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
    _index = STATIC_DIR / "index.html"

    @app.get("/", include_in_schema=False)
    async def _index_page():
        return FileResponse(_index)

    return app


app = create_app()


def run(**kwargs: Any) -> None:
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=settings.uvicorn_workers,
        log_level=settings.log_level.lower(),
        **kwargs,
    )


if __name__ == "__main__":
    run()
