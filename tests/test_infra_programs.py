"""End-to-end tests running each Pulumi program under runtime mocks."""

from __future__ import annotations

import runpy
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pulumi
import pytest

_INFRA_ROOT = Path(__file__).resolve().parents[1] / "infra"


@pytest.fixture
def stack_exports(monkeypatch: pytest.MonkeyPatch) -> dict[str, Any]:
    """Replace `pulumi.export` with a recorder keeping export order.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        dict[str, Any]: Exported values by output name.

    Raises:
        RuntimeError: This fixture does not raise runtime errors.
    """

    exports: dict[str, Any] = {}
    monkeypatch.setattr(pulumi, "export", lambda key, value: exports.__setitem__(key, value))
    return exports


def _run_program(directory_name: str) -> None:
    runpy.run_path(str(_INFRA_ROOT / directory_name / "__main__.py"), run_name="__main__")


@pulumi.runtime.test
def test_app_platform_program_exports_only_live_url(
    pulumi_mocks: Callable[[str], None],
    stack_exports: dict[str, Any],
):
    """Run the App Platform program and export exactly the `url` output.

    Args:
        pulumi_mocks: Mock installer fixture.
        stack_exports: Recorded stack exports.

    Returns:
        pulumi.Output: Output whose resolution checks the exported URL.

    Raises:
        AssertionError: Raised when exports differ.
    """

    pulumi_mocks("do-app-platform")
    for key, value in {
        "appName": "hello-world",
        "region": "fra",
        "repoCloneUrl": "https://github.com/example/hello-world.git",
        "branch": "main",
        "instanceCount": "1",
        "instanceSize": "basic-xxs",
    }.items():
        pulumi.runtime.set_config(f"do-app-platform:{key}", value)

    _run_program("app_platform")

    assert list(stack_exports) == ["url"]
    return stack_exports["url"].apply(lambda url: _assert_equal(url, "https://my-app-abc12.ondigitalocean.app"))


@pulumi.runtime.test
def test_local_command_program_exports_hello_message(
    pulumi_mocks: Callable[[str], None],
    stack_exports: dict[str, Any],
):
    pulumi_mocks("local-command")

    _run_program("local_command")

    assert list(stack_exports) == ["helloMessage"]
    return stack_exports["helloMessage"].apply(lambda message: _assert_equal(message, "hello"))


@pulumi.runtime.test
def test_s3_bucket_program_exports_bucket_name_and_arn(
    pulumi_mocks: Callable[[str], None],
    stack_exports: dict[str, Any],
):
    pulumi_mocks("s3-bucket")

    _run_program("s3_bucket")

    assert list(stack_exports) == ["bucketName", "bucketArn"]
    return pulumi.Output.all(stack_exports["bucketName"], stack_exports["bucketArn"]).apply(
        lambda values: _assert_equal(values, ["my-bucket_id", "arn:aws:s3:::my-bucket_id"])
    )


def _assert_equal(actual: Any, expected: Any) -> None:
    assert actual == expected
