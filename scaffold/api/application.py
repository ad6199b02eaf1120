"""FastAPI application factory for the static responder service.

The application exposes a single documented route. Interactive docs and the
OpenAPI schema routes are disabled so every other path falls through to the
framework's default 404.
"""

from fastapi import FastAPI

from scaffold.domain import StaticResponderProfile

from .routers import api_create_greeting_router


def create_api_application(profile: StaticResponderProfile) -> FastAPI:
    """Create the FastAPI application instance for one responder profile.

    Args:
        profile: Static responder profile providing the response body.

    Returns:
        FastAPI: Framework application instance with the greeting route.

    Raises:
        ValueError: Raised when profile is None.
    """

    if profile is None:
        raise ValueError("profile must not be None")

    application = FastAPI(
        title=f"Static responder ({profile.profile_name})",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    application.include_router(api_create_greeting_router(response_body=profile.response_body))
    return application
