"""User resource routes."""

from fastapi import APIRouter, Response, status

from commerce_api.api.dependencies import UserHandlerDep
from commerce_api.dto import ErrorResponse, UserRequest, UserResponse

ERROR_RESPONSES = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ErrorResponse},
}

router = APIRouter(prefix="/user", tags=["user"], responses=ERROR_RESPONSES)


@router.get("/{username}", response_model=UserResponse)
async def get_user(username: str, handler: UserHandlerDep) -> UserResponse:
    return await handler.get_user(username)


@router.post("/", status_code=status.HTTP_201_CREATED, response_class=Response)
async def create_user(request: UserRequest, handler: UserHandlerDep) -> Response:
    return await handler.create_user(request)


@router.delete("/{username}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_user(username: str, handler: UserHandlerDep) -> Response:
    return await handler.delete_user(username)


@router.put("/", response_class=Response)
async def update_user(request: UserRequest, handler: UserHandlerDep) -> Response:
    return await handler.update_user(request)
