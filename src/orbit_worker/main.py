"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from ddtrace import patch_all
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from orbit_worker.config import load_config
from orbit_worker.dependencies import build_handler
from orbit_worker.handlers import EntryHandler
from orbit_worker.logging import setup_logging
from orbit_worker.response_models import ErrorResponse
from orbit_worker.routes import health_router, process_router

logger = logging.getLogger(__name__)


def create_app(handler: EntryHandler | None = None) -> FastAPI:
    """
    Creates the worker application.

    Without a handler, configuration is loaded and the collaborators are
    built on startup. Either way the transcription engine is loaded before
    the app starts serving; a load failure aborts startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        entry_handler = handler
        if entry_handler is None:
            config = load_config()
            setup_logging(config.server.log_level)
            entry_handler = build_handler(config)
        entry_handler.warm_up()
        app.state.handler = entry_handler
        logger.info("Orbit worker ready")
        yield

    app = FastAPI(title="Orbit Worker", lifespan=lifespan)
    app.include_router(health_router)
    app.include_router(process_router)

    @app.exception_handler(RequestValidationError)
    async def _invalid_request(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(
                error="invalid_request", details=jsonable_encoder(exc.errors())
            ).model_dump(),
        )

    return app


def main():
    """Starts the worker HTTP server."""
    patch_all()
    config = load_config()
    setup_logging(config.server.log_level)
    logger.info(
        "Starting orbit worker",
        extra={"port": config.server.port, "store_backend": config.store.backend},
    )
    worker_app = create_app(build_handler(config))
    uvicorn.run(
        worker_app,
        host=config.server.host,
        port=config.server.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
