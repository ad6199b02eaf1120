"""Pulumi-backed provisioning engines and the stack output store."""

from __future__ import annotations

from typing import Any

import pulumi
import pulumi_aws as aws
import pulumi_digitalocean as digitalocean
from pulumi_command import local

from scaffold.domain import AppResourceSpec, AppServiceSpec, BucketSpec, LocalCommandSpec

from .interfaces import (
    BucketEnginePort,
    CommandEnginePort,
    OutputStorePort,
    ProvisionedAppHandle,
    ProvisionedBucketHandle,
    ProvisionedCommandHandle,
    ProvisioningEnginePort,
)


class PulumiDigitalOceanEngine(ProvisioningEnginePort):
    """Register the application specification as a `digitalocean.App` resource."""

    def __init__(self, resource_name: str = "my-app", opts: pulumi.ResourceOptions | None = None):
        """Initialize engine adapter.

        Args:
            resource_name: Pulumi logical resource name.
            opts: Optional Pulumi resource options.

        Returns:
            None: Initializer does not return values.

        Raises:
            ValueError: Raised when resource name is blank.
        """

        if not resource_name.strip():
            raise ValueError("resource_name must not be blank")

        self._resource_name = resource_name
        self._opts = opts

    def engine_name(self) -> str:
        """Return stable engine label.

        Returns:
            str: Engine identifier.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        return "pulumi_digitalocean_app_platform"

    def engine_submit_app(self, spec: AppResourceSpec) -> ProvisionedAppHandle:
        """Register the App resource and return its live URL output.

        Args:
            spec: Fully populated resource specification.

        Returns:
            ProvisionedAppHandle: Resource plus its `live_url` output.

        Raises:
            Exception: Pulumi registration errors propagate unchanged.
        """

        app = digitalocean.App(
            self._resource_name,
            spec=digitalocean.AppSpecArgs(
                name=spec.name,
                region=spec.region,
                services=[self._engine_build_service_args(service) for service in spec.services],
            ),
            opts=self._opts,
        )
        return ProvisionedAppHandle(resource=app, live_url=app.live_url)

    def _engine_build_service_args(self, service: AppServiceSpec) -> digitalocean.AppSpecServiceArgs:
        return digitalocean.AppSpecServiceArgs(
            name=service.name,
            git=digitalocean.AppSpecServiceGitArgs(
                repo_clone_url=service.git.repo_clone_url,
                branch=service.git.branch,
            ),
            instance_count=service.instance_count,
            instance_size_slug=service.instance_size_slug,
        )


class PulumiLocalCommandEngine(CommandEnginePort):
    """Register lifecycle commands as a `command.local.Command` resource."""

    def __init__(self, opts: pulumi.ResourceOptions | None = None):
        self._opts = opts

    def engine_name(self) -> str:
        return "pulumi_command_local"

    def engine_submit_command(self, spec: LocalCommandSpec) -> ProvisionedCommandHandle:
        """Register the command resource and return its stdout output.

        Args:
            spec: Lifecycle commands.

        Returns:
            ProvisionedCommandHandle: Resource plus its `stdout` output.

        Raises:
            Exception: Pulumi registration errors propagate unchanged.
        """

        command = local.Command(
            spec.resource_name,
            create=spec.create,
            update=spec.update,
            delete=spec.delete,
            opts=self._opts,
        )
        return ProvisionedCommandHandle(resource=command, stdout=command.stdout)


class PulumiAwsBucketEngine(BucketEnginePort):
    """Register the bucket description as an `aws.s3.Bucket` resource."""

    def __init__(self, opts: pulumi.ResourceOptions | None = None):
        self._opts = opts

    def engine_name(self) -> str:
        return "pulumi_aws_s3"

    def engine_submit_bucket(self, spec: BucketSpec) -> ProvisionedBucketHandle:
        """Register the bucket and return its id and ARN outputs.

        Args:
            spec: Bucket description.

        Returns:
            ProvisionedBucketHandle: Resource plus `id` as bucket name and `arn`.

        Raises:
            Exception: Pulumi registration errors propagate unchanged.
        """

        bucket = aws.s3.Bucket(spec.resource_name, tags=dict(spec.tags), opts=self._opts)
        return ProvisionedBucketHandle(resource=bucket, bucket_name=bucket.id, bucket_arn=bucket.arn)


class PulumiStackOutputStore(OutputStorePort):
    """Write named values as Pulumi stack outputs."""

    def output_export(self, key: str, value: Any) -> None:
        pulumi.export(key, value)
