import logging
from collections.abc import Awaitable, Callable

import uvicorn
from fastapi import FastAPI

from commerce_api.api.context import AppContext, build_context
from commerce_api.api.dependencies import lifespan
from commerce_api.api.routes import greeting, stubs, users
from commerce_api.config import Settings, get_settings
from commerce_api.errors import register_error_handlers
from commerce_api.logging import configure_logging

logger = logging.getLogger(__name__)

API_PREFIX = "/v1"

ContextFactory = Callable[[Settings], Awaitable[AppContext]]


def create_app(
    settings: Settings | None = None,
    context_factory: ContextFactory = build_context,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Settings to start with. If None, read from the environment at startup.
        context_factory: Coroutine building the shared context from settings.

    Returns:
        The configured application
    """
    app = FastAPI(
        title="Commerce API",
        description="User CRUD over a pooled relational store, plus acknowledgement endpoints",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.context_factory = context_factory

    register_error_handlers(app)

    # Paths are disjoint, so order does not matter
    app.include_router(stubs.router, prefix=API_PREFIX)
    app.include_router(greeting.router, prefix=API_PREFIX)
    app.include_router(users.router, prefix=API_PREFIX)

    return app


app = create_app()


def main() -> None:
    """Run the service with a single worker."""
    try:
        settings = get_settings()
    except ValueError as e:
        configure_logging()
        logger.critical("Invalid configuration: %s", e)
        raise SystemExit(1) from e

    configure_logging(settings.log_level)

    uvicorn.run(
        create_app(settings),
        host=settings.api_host,
        port=settings.api_port,
        workers=1,
        log_config=None,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
