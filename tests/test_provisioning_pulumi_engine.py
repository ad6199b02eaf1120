"""Tests for Pulumi engine adapters using Pulumi runtime mocks."""

from __future__ import annotations

from collections.abc import Callable

import pulumi
import pytest

import scaffold.provisioning.pulumi_engine as pulumi_engine_module
from scaffold.domain import AppResourceSpec, AppServiceSpec, BucketSpec, GitSourceSpec
from scaffold.provisioning import provisioning_build_hello_command_spec


@pytest.fixture(autouse=True)
def _install_mocks(pulumi_mocks: Callable[[str], None]) -> None:
    pulumi_mocks("pulumi-skeleton-engines")


def _build_spec() -> AppResourceSpec:
    return AppResourceSpec(
        name="hello-world",
        region="ams",
        services=(
            AppServiceSpec(
                name="web",
                git=GitSourceSpec(repo_clone_url="https://github.com/example/hello-world.git", branch="main"),
                instance_count=2,
                instance_size_slug="basic-xxs",
            ),
        ),
    )


@pulumi.runtime.test
def test_provisioning_pulumi_engine_registers_app_and_exposes_live_url():
    """Register an App resource whose handle resolves to the engine live URL.

    Returns:
        pulumi.Output: Output whose resolution runs the assertions.

    Raises:
        AssertionError: Raised when registered spec or live URL differ.
    """

    handle = pulumi_engine_module.PulumiDigitalOceanEngine(resource_name="my-app").engine_submit_app(_build_spec())

    def _check(resolved_values: list) -> None:
        live_url, app_spec = resolved_values
        assert live_url == "https://my-app-abc12.ondigitalocean.app"
        assert app_spec["name"] == "hello-world"
        assert app_spec["region"] == "ams"
        assert len(app_spec["services"]) == 1
        service = app_spec["services"][0]
        assert service["name"] == "web"
        assert service["git"]["repo_clone_url"] == "https://github.com/example/hello-world.git"
        assert service["git"]["branch"] == "main"
        assert service["instance_count"] == 2
        assert service["instance_size_slug"] == "basic-xxs"

    return pulumi.Output.all(handle.live_url, handle.resource.spec).apply(_check)


def test_provisioning_pulumi_engine_rejects_blank_resource_name() -> None:
    with pytest.raises(ValueError, match="resource_name must not be blank"):
        pulumi_engine_module.PulumiDigitalOceanEngine(resource_name="  ")


@pulumi.runtime.test
def test_provisioning_pulumi_local_command_engine_registers_lifecycle_commands():
    handle = pulumi_engine_module.PulumiLocalCommandEngine().engine_submit_command(
        provisioning_build_hello_command_spec()
    )

    def _check(resolved_values: list) -> None:
        stdout, create, update, delete = resolved_values
        assert stdout == "hello"
        assert create == "echo hello"
        assert update == "echo hello again"
        assert delete == "echo goodbye"

    command = handle.resource
    return pulumi.Output.all(handle.stdout, command.create, command.update, command.delete).apply(_check)


@pulumi.runtime.test
def test_provisioning_pulumi_aws_bucket_engine_registers_tags_and_exposes_id_and_arn():
    """Register a tagged bucket whose handle resolves to its id and ARN.

    Returns:
        pulumi.Output: Output whose resolution runs the assertions.

    Raises:
        AssertionError: Raised when tags, name or ARN differ.
    """

    spec = BucketSpec(
        resource_name="my-bucket",
        tags=(("Name", "hello-world-bucket"), ("Environment", "test"), ("ManagedBy", "pulumi")),
    )
    handle = pulumi_engine_module.PulumiAwsBucketEngine().engine_submit_bucket(spec)

    def _check(resolved_values: list) -> None:
        bucket_name, bucket_arn, tags = resolved_values
        assert bucket_name == "my-bucket_id"
        assert bucket_arn == "arn:aws:s3:::my-bucket_id"
        assert tags == {"Name": "hello-world-bucket", "Environment": "test", "ManagedBy": "pulumi"}

    return pulumi.Output.all(handle.bucket_name, handle.bucket_arn, handle.resource.tags).apply(_check)


def test_provisioning_pulumi_output_store_delegates_to_stack_export(monkeypatch: pytest.MonkeyPatch) -> None:
    """Forward each export to `pulumi.export` unchanged.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate delegation.

    Raises:
        AssertionError: Raised when exports are altered.
    """

    exported: list[tuple[str, object]] = []
    monkeypatch.setattr(pulumi_engine_module.pulumi, "export", lambda key, value: exported.append((key, value)))

    pulumi_engine_module.PulumiStackOutputStore().output_export("url", "https://hello-world.example")

    assert exported == [("url", "https://hello-world.example")]
