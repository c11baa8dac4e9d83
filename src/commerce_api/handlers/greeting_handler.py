"""HTTP handler for the greeting endpoint."""

import logging

from fastapi import status
from fastapi.responses import PlainTextResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from commerce_api.errors import StoreConnectionError
from commerce_api.repositories import DatabasePool

logger = logging.getLogger(__name__)

CURRENT_TIME = text("SELECT current_time")


class GreetingHandler:
    """Greets by name with the store's current time.

    Failures answer with plain-text 500 bodies rather than the JSON
    error envelope.
    """

    def __init__(self, pool: DatabasePool) -> None:
        self._pool = pool

    async def greet(self, name: str) -> PlainTextResponse:
        """Handle GET /hello/{name} requests."""
        try:
            async with self._pool.acquire() as conn:
                try:
                    result = await conn.execute(CURRENT_TIME)
                    current_time = result.scalar_one()
                except SQLAlchemyError as e:
                    logger.warning("greeting query failed: %s", e)
                    return PlainTextResponse(
                        "query failed",
                        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    )
        except StoreConnectionError as e:
            logger.error("greeting could not borrow a connection: %s", e.message)
            return PlainTextResponse(
                "failed to acquire connection from pool",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return PlainTextResponse(f"hello {name}, the current time is {current_time} (UTC)")
