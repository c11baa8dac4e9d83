"""Greeting route."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from commerce_api.api.dependencies import GreetingHandlerDep

router = APIRouter(tags=["greeting"])


@router.get("/hello/{name}", response_class=PlainTextResponse)
async def greet(name: str, handler: GreetingHandlerDep) -> PlainTextResponse:
    return await handler.greet(name)
