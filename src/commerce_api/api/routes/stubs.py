"""Resources that only acknowledge requests.

They answer 200 with an empty body and need no shared context.
"""

from fastapi import APIRouter, Response

router = APIRouter(tags=["stubs"])


def _ok() -> Response:
    return Response()


@router.get("/inventory", response_class=Response)
async def inventory() -> Response:
    return _ok()


@router.get("/notify", response_class=Response)
async def notify() -> Response:
    return _ok()


@router.api_route("/order", methods=["GET", "HEAD"], response_class=Response)
async def order() -> Response:
    return _ok()


@router.get("/payment", response_class=Response)
async def payment() -> Response:
    return _ok()


@router.api_route("/product", methods=["GET", "HEAD"], response_class=Response)
async def product() -> Response:
    return _ok()
