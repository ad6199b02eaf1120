"""API router package for endpoint composition."""

from .greeting import api_create_greeting_router

__all__ = ["api_create_greeting_router"]
