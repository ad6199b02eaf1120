"""Shared Pulumi runtime mocks for engine and program tests."""

from __future__ import annotations

from collections.abc import Callable

import pulumi
import pytest


class _TemplateMocks(pulumi.runtime.Mocks):
    """Pulumi mocks echoing inputs and adding provider-computed outputs."""

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        """Echo inputs as outputs and add the outputs each provider computes.

        Args:
            args: Mocked resource registration.

        Returns:
            list: Resource id and output state.

        Raises:
            RuntimeError: This mock does not raise runtime errors.
        """

        outputs = dict(args.inputs)
        if args.typ == "digitalocean:index/app:App":
            outputs["liveUrl"] = f"https://{args.name}-abc12.ondigitalocean.app"
        elif args.typ == "command:local:Command":
            outputs["stdout"] = "hello"
        elif args.typ.startswith("aws:s3/bucket"):
            outputs["arn"] = f"arn:aws:s3:::{args.name}_id"
        return [f"{args.name}_id", outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        return {}


@pytest.fixture
def pulumi_mocks() -> Callable[[str], None]:
    """Return an installer activating the mocks for one Pulumi project name.

    Returns:
        Callable[[str], None]: Installer taking the project name.

    Raises:
        RuntimeError: This fixture does not raise runtime errors.
    """

    def _install(project_name: str) -> None:
        pulumi.runtime.set_mocks(_TemplateMocks(), project=project_name, stack="test", preview=False)

    return _install
