"""Greeting router serving the static responder payload."""

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse


def api_create_greeting_router(response_body: str) -> APIRouter:
    """Create router answering `GET /` with a fixed plain-text body.

    Args:
        response_body: Exact body returned for every `GET /` request.

    Returns:
        APIRouter: Router exposing the `/` endpoint.

    Raises:
        ValueError: Raised when response_body is None.
    """

    if response_body is None:
        raise ValueError("response_body must not be None")

    router = APIRouter(tags=["greeting"])

    @router.get("/", response_class=PlainTextResponse)
    def api_greeting() -> PlainTextResponse:
        return PlainTextResponse(content=response_body, status_code=status.HTTP_200_OK)

    return router
