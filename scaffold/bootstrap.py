"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from scaffold.adapters import HttpSmokeProbeAdapter
from scaffold.api import create_api_application
from scaffold.config import (
    ProvisioningConfigSourcePort,
    ServiceSettings,
    config_load_bucket_settings,
    config_load_provisioning_settings,
)
from scaffold.domain import domain_get_responder_profile, domain_resolve_listener_port
from scaffold.provisioning import (
    BucketDeclaration,
    BucketEnginePort,
    CommandEnginePort,
    LocalCommandDeclaration,
    OutputStorePort,
    ProvisioningDeclaration,
    ProvisioningEnginePort,
)
from scaffold.provisioning.pulumi_engine import (
    PulumiAwsBucketEngine,
    PulumiDigitalOceanEngine,
    PulumiLocalCommandEngine,
    PulumiStackOutputStore,
)


def bootstrap_create_service_application(settings: ServiceSettings) -> FastAPI:
    """Assemble the static responder application for the configured profile.

    Args:
        settings: Validated service settings.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        ValueError: Raised when the configured profile is unknown.
    """

    profile = domain_get_responder_profile(settings.service_profile)
    return create_api_application(profile=profile)


def bootstrap_resolve_service_listener(settings: ServiceSettings) -> tuple[str, int]:
    """Resolve host and port the service listener binds to.

    Args:
        settings: Validated service settings.

    Returns:
        tuple[str, int]: Listener host and port.

    Raises:
        ValueError: Raised when the configured profile is unknown.
    """

    profile = domain_get_responder_profile(settings.service_profile)
    return settings.service_host, domain_resolve_listener_port(profile, settings.port)


def bootstrap_create_provisioning_declaration(
    config_source: ProvisioningConfigSourcePort,
    engine: ProvisioningEnginePort | None = None,
    output_store: OutputStorePort | None = None,
) -> ProvisioningDeclaration:
    """Build the provisioning declaration from the engine configuration store.

    Pulumi adapters are used unless explicit ports are supplied.

    Args:
        config_source: Provisioning configuration lookup, usually `pulumi.Config()`.
        engine: Optional provisioning engine override.
        output_store: Optional output store override.

    Returns:
        ProvisioningDeclaration: Declaration ready for a single submission.

    Raises:
        Exception: Configuration source errors propagate unchanged.
    """

    return ProvisioningDeclaration(
        engine=engine or PulumiDigitalOceanEngine(),
        output_store=output_store or PulumiStackOutputStore(),
        settings=config_load_provisioning_settings(config_source),
    )


def bootstrap_create_local_command_declaration(
    engine: CommandEnginePort | None = None,
    output_store: OutputStorePort | None = None,
) -> LocalCommandDeclaration:
    """Build the local command declaration, Pulumi adapters unless overridden."""

    return LocalCommandDeclaration(
        engine=engine or PulumiLocalCommandEngine(),
        output_store=output_store or PulumiStackOutputStore(),
    )


def bootstrap_create_bucket_declaration(
    config_source: ProvisioningConfigSourcePort,
    project_name: str,
    stack_name: str,
    engine: BucketEnginePort | None = None,
    output_store: OutputStorePort | None = None,
) -> BucketDeclaration:
    """Build the bucket declaration from the engine configuration store.

    Args:
        config_source: Provisioning configuration lookup, usually `pulumi.Config()`.
        project_name: Engine project name, the default component name.
        stack_name: Engine stack name, the default environment label.
        engine: Optional bucket engine override.
        output_store: Optional output store override.

    Returns:
        BucketDeclaration: Declaration ready for a single submission.

    Raises:
        Exception: Configuration source errors propagate unchanged.
    """

    return BucketDeclaration(
        engine=engine or PulumiAwsBucketEngine(),
        output_store=output_store or PulumiStackOutputStore(),
        settings=config_load_bucket_settings(config_source, project_name=project_name, stack_name=stack_name),
    )


def bootstrap_create_smoke_probe(settings: ServiceSettings) -> HttpSmokeProbeAdapter:
    """Build the deployment smoke probe from service settings.

    Args:
        settings: Validated service settings.

    Returns:
        HttpSmokeProbeAdapter: Configured smoke probe.

    Raises:
        ValueError: Raised when retry settings are invalid.
    """

    return HttpSmokeProbeAdapter(
        retry_attempts=settings.smoke_retry_attempts,
        retry_backoff_base_seconds=settings.smoke_backoff_base_seconds,
        retry_max_backoff_seconds=settings.smoke_backoff_max_seconds,
        request_timeout_seconds=settings.smoke_request_timeout_seconds,
    )
