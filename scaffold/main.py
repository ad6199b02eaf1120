"""Main module entrypoint for local runtime execution.

This module validates startup configuration and either launches the static
responder service or smoke-checks a deployed one.
"""

import argparse
import logging
from collections.abc import Sequence

import uvicorn

from scaffold.bootstrap import (
    bootstrap_create_service_application,
    bootstrap_create_smoke_probe,
    bootstrap_resolve_service_listener,
)
from scaffold.config import config_configure_logging, config_load_service_settings
from scaffold.domain import RESPONDER_PROFILES, domain_get_responder_profile

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> None:
    """Run selected runtime command with validated startup configuration.

    Args:
        argv: Optional argument list, `sys.argv[1:]` when omitted.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with code 1 when the smoke check fails.
    """

    argument_parser = argparse.ArgumentParser(description="Pulumi skeleton service runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="serve",
        choices=("serve", "smoke-check"),
        help="Runtime command: `serve` starts the static responder, `smoke-check` probes a deployed one",
        type=str,
    )
    argument_parser.add_argument(
        "--profile",
        dest="profile",
        choices=sorted(RESPONDER_PROFILES),
        help="Responder profile override; defaults to SERVICE_PROFILE",
        type=str,
    )
    argument_parser.add_argument(
        "--url",
        dest="url",
        type=str,
        help="Deployment URL for `smoke-check`, usually the exported `url` stack output",
    )
    parsed_arguments = argument_parser.parse_args(argv)

    settings = config_load_service_settings(service_profile=parsed_arguments.profile)
    config_configure_logging(settings.log_level)

    if parsed_arguments.command == "smoke-check":
        if not parsed_arguments.url:
            argument_parser.error("--url is required for smoke-check")
        profile = domain_get_responder_profile(settings.service_profile)
        smoke_probe = bootstrap_create_smoke_probe(settings)
        probe_result = smoke_probe.probe_check_url(url=parsed_arguments.url, expected_body=profile.response_body)
        if probe_result.status != "passed":
            logger.error("Smoke check failed for %s: %s", probe_result.url, probe_result.detail)
            raise SystemExit(1)
        return

    application = bootstrap_create_service_application(settings)
    host, port = bootstrap_resolve_service_listener(settings)
    logger.info("Starting %s responder on %s:%d", settings.service_profile, host, port)
    uvicorn.run(
        application,
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
