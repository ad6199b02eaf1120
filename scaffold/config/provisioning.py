"""Provisioning configuration read from the engine's key-value store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class ProvisioningConfigSourcePort(Protocol):
    """Keyed lookup over provisioning configuration values.

    `pulumi.Config` satisfies this port; tests inject a dictionary-backed fake.
    """

    def get(self, key: str) -> str | None:
        """Return string value for key, or None when absent."""

    def get_int(self, key: str) -> int | None:
        """Return integer value for key, or None when absent."""


@dataclass(frozen=True)
class ProvisioningSettings:
    """Provisioning configuration values read once at program start.

    Attributes:
        app_name: Application name on the hosting platform.
        region: Platform region slug.
        repo_clone_url: Source repository clone URL.
        branch: Source repository branch.
        instance_count: Number of service instances.
        instance_size: Platform instance size slug.
    """

    app_name: str
    region: str
    repo_clone_url: str
    branch: str
    instance_count: int
    instance_size: str


def config_load_provisioning_settings(config_source: ProvisioningConfigSourcePort) -> ProvisioningSettings:
    """Read the six provisioning keys from the configuration source.

    Absent keys yield an empty string or zero. Values are passed through
    verbatim; the provisioning engine decides whether they are acceptable.

    Args:
        config_source: Provisioning configuration lookup.

    Returns:
        ProvisioningSettings: Immutable provisioning values.

    Raises:
        Exception: Errors raised by the configuration source propagate unchanged.
    """

    return ProvisioningSettings(
        app_name=config_source.get("appName") or "",
        region=config_source.get("region") or "",
        repo_clone_url=config_source.get("repoCloneUrl") or "",
        branch=config_source.get("branch") or "",
        instance_count=config_source.get_int("instanceCount") or 0,
        instance_size=config_source.get("instanceSize") or "",
    )


@dataclass(frozen=True)
class BucketSettings:
    """Values substituted into bucket tags.

    Attributes:
        component_name: Component name used as the bucket tag prefix.
        environment: Deployment environment label, usually the stack name.
    """

    component_name: str
    environment: str


def config_load_bucket_settings(
    config_source: ProvisioningConfigSourcePort,
    project_name: str,
    stack_name: str,
) -> BucketSettings:
    """Read bucket tag values, falling back to the project and stack names.

    Args:
        config_source: Provisioning configuration lookup.
        project_name: Engine project name used when `name` is absent.
        stack_name: Engine stack name used when `environment` is absent.

    Returns:
        BucketSettings: Immutable bucket tag values.

    Raises:
        Exception: Errors raised by the configuration source propagate unchanged.
    """

    return BucketSettings(
        component_name=config_source.get("name") or project_name,
        environment=config_source.get("environment") or stack_name,
    )
