"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing the shared context.

Pattern:
    - Context and handlers stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - No global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from commerce_api.config import get_settings
from commerce_api.handlers import GreetingHandler, UserHandler
from commerce_api.repositories import SqlUserRepository

logger = logging.getLogger(__name__)


def get_user_handler(request: Request) -> UserHandler:
    """Dependency injection for UserHandler from app.state.

    Raises:
        RuntimeError: If the handler is not initialized
    """
    handler = getattr(request.app.state, "user_handler", None)
    if handler is None:
        raise RuntimeError("UserHandler not initialized. Check lifespan setup.")
    return handler


def get_greeting_handler(request: Request) -> GreetingHandler:
    """Dependency injection for GreetingHandler from app.state.

    Raises:
        RuntimeError: If the handler is not initialized
    """
    handler = getattr(request.app.state, "greeting_handler", None)
    if handler is None:
        raise RuntimeError("GreetingHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Builds the shared context with ``app.state.context_factory`` and
    stores it, and the handlers bound to it, in app.state. Settings come
    from ``app.state.settings`` or, when unset, the environment.

    Cleanup:
        Removes everything from app.state and closes both pools
    """
    settings = app.state.settings or get_settings()
    context = await app.state.context_factory(settings)

    app.state.context = context
    app.state.user_handler = UserHandler(user_store=SqlUserRepository(context.database))
    app.state.greeting_handler = GreetingHandler(context.database)
    logger.info("Service context initialized")

    try:
        yield
    finally:
        del app.state.greeting_handler
        del app.state.user_handler
        del app.state.context
        await context.close()
        logger.info("Service context shut down")


# Type aliases for cleaner dependency injection
UserHandlerDep = Annotated[UserHandler, Depends(get_user_handler)]
GreetingHandlerDep = Annotated[GreetingHandler, Depends(get_greeting_handler)]
