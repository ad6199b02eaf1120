"""Static responder profiles and listener port resolution."""

from __future__ import annotations

from typing import Final

from .models import StaticResponderProfile

APP_PLATFORM_PROFILE: Final[StaticResponderProfile] = StaticResponderProfile(
    profile_name="app-platform",
    default_port=80,
    response_body="Hello, World!",
    reads_port_environment=True,
)
KUBERNETES_PROFILE: Final[StaticResponderProfile] = StaticResponderProfile(
    profile_name="kubernetes",
    default_port=9090,
    response_body="Hello Pulumi Backstage World",
    reads_port_environment=False,
)
RESPONDER_PROFILES: Final[dict[str, StaticResponderProfile]] = {
    APP_PLATFORM_PROFILE.profile_name: APP_PLATFORM_PROFILE,
    KUBERNETES_PROFILE.profile_name: KUBERNETES_PROFILE,
}


def domain_get_responder_profile(profile_name: str) -> StaticResponderProfile:
    """Return the responder profile registered under the given name.

    Args:
        profile_name: Profile identifier.

    Returns:
        StaticResponderProfile: Matching profile.

    Raises:
        ValueError: Raised when no profile has the given name.
    """

    profile = RESPONDER_PROFILES.get(profile_name)
    if profile is None:
        known_names = ", ".join(sorted(RESPONDER_PROFILES))
        raise ValueError(f"unknown service profile: {profile_name} (known: {known_names})")
    return profile


def domain_resolve_listener_port(profile: StaticResponderProfile, port_value: str | None) -> int:
    """Resolve the listener port from profile default and optional override.

    Args:
        profile: Responder profile.
        port_value: Raw `PORT` value, or None when unset.

    Returns:
        int: Port the listener binds to.

    Raises:
        ValueError: Raised when the override is not an integer.
    """

    if profile.reads_port_environment and port_value:
        return int(port_value)
    return profile.default_port
