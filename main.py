import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from helloworld.config import get_settings
from helloworld.infrastructure.logging_config import configure_logging
from helloworld.interfaces.api.errors import register_exception_handlers
from helloworld.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Set up logging and log the service lifecycle.

    Runs before the server binds its socket, so the startup line announces
    the port rather than confirming it.
    """

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("%s starting on port %s", settings.app_name, settings.port)
    yield
    logger.info("%s shutting down", settings.app_name)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Only the explicitly registered routes are exposed: the generated
    documentation endpoints are disabled and paths must match exactly, so
    ``/hello/`` is not redirected to ``/hello``.
    """

    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    register_exception_handlers(app)
    register_routes(app)
    return app


app = create_app()


def run() -> None:
    """Start the HTTP server with the configured host, port and log level."""

    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    run()
