"""Typed interfaces for provisioning-layer responsibilities."""

from dataclasses import dataclass
from typing import Any, Protocol

from scaffold.domain import AppResourceSpec, BucketSpec, LocalCommandSpec


@dataclass(frozen=True)
class ProvisionedAppHandle:
    """Engine handle for a submitted application resource.

    Attributes:
        resource: Opaque engine-defined resource object.
        live_url: Engine-assigned public URL, a string or an engine-native deferred output.
    """

    resource: Any
    live_url: Any


@dataclass(frozen=True)
class ProvisionedCommandHandle:
    """Engine handle for a submitted local command resource.

    Attributes:
        resource: Opaque engine-defined resource object.
        stdout: Captured standard output of the last lifecycle command.
    """

    resource: Any
    stdout: Any


@dataclass(frozen=True)
class ProvisionedBucketHandle:
    """Engine handle for a submitted bucket resource.

    Attributes:
        resource: Opaque engine-defined resource object.
        bucket_name: Engine-assigned bucket name.
        bucket_arn: Engine-assigned bucket ARN.
    """

    resource: Any
    bucket_name: Any
    bucket_arn: Any


@dataclass(frozen=True)
class ProvisioningResult:
    """Result contract for one provisioning declaration run.

    Attributes:
        state: Final declaration state.
        spec: Submitted resource specification.
        handle: Engine handle returned on submission.
        output_keys: Names of the outputs exported, in export order.
    """

    state: str
    spec: AppResourceSpec | LocalCommandSpec | BucketSpec
    handle: ProvisionedAppHandle | ProvisionedCommandHandle | ProvisionedBucketHandle
    output_keys: tuple[str, ...] = ()


class ProvisioningEnginePort(Protocol):
    """Port definition for the external application provisioning engine."""

    def engine_name(self) -> str:
        """Return engine identifier for diagnostics.

        Returns:
            str: Human-readable engine identifier.

        Raises:
            RuntimeError: Raised when engine metadata is unavailable.
        """

    def engine_submit_app(self, spec: AppResourceSpec) -> ProvisionedAppHandle:
        """Submit one fully populated application specification.

        Args:
            spec: Resource specification to create.

        Returns:
            ProvisionedAppHandle: Handle exposing the live URL.

        Raises:
            Exception: Any engine failure, surfaced verbatim.
        """


class CommandEnginePort(Protocol):
    """Port definition for engines running lifecycle commands locally."""

    def engine_name(self) -> str:
        """Return engine identifier for diagnostics."""

    def engine_submit_command(self, spec: LocalCommandSpec) -> ProvisionedCommandHandle:
        """Submit one local command resource.

        Args:
            spec: Lifecycle commands to register.

        Returns:
            ProvisionedCommandHandle: Handle exposing captured stdout.

        Raises:
            Exception: Any engine failure, surfaced verbatim.
        """


class BucketEnginePort(Protocol):
    """Port definition for engines creating object storage buckets."""

    def engine_name(self) -> str:
        """Return engine identifier for diagnostics."""

    def engine_submit_bucket(self, spec: BucketSpec) -> ProvisionedBucketHandle:
        """Submit one bucket resource.

        Args:
            spec: Bucket description.

        Returns:
            ProvisionedBucketHandle: Handle exposing bucket name and ARN.

        Raises:
            Exception: Any engine failure, surfaced verbatim.
        """


class OutputStorePort(Protocol):
    """Port definition for the engine's named output store."""

    def output_export(self, key: str, value: Any) -> None:
        """Write one named output value.

        Args:
            key: Output name.
            value: Output value.

        Returns:
            None: Writes the output as side effect.

        Raises:
            RuntimeError: Raised when the output store rejects the write.
        """
