"""Domain models used across application layer boundaries."""

from .models import (
    AppResourceSpec,
    AppServiceSpec,
    BucketSpec,
    GitSourceSpec,
    LocalCommandSpec,
    StaticResponderProfile,
)
from .profiles import (
    APP_PLATFORM_PROFILE,
    KUBERNETES_PROFILE,
    RESPONDER_PROFILES,
    domain_get_responder_profile,
    domain_resolve_listener_port,
)

__all__ = [
    "APP_PLATFORM_PROFILE",
    "AppResourceSpec",
    "AppServiceSpec",
    "BucketSpec",
    "GitSourceSpec",
    "KUBERNETES_PROFILE",
    "LocalCommandSpec",
    "RESPONDER_PROFILES",
    "StaticResponderProfile",
    "domain_get_responder_profile",
    "domain_resolve_listener_port",
]
