"""Provisioning declarations that submit one resource each and export its outputs."""

from __future__ import annotations

import logging
from typing import Final

from scaffold.config import BucketSettings, ProvisioningSettings
from scaffold.domain import AppResourceSpec, AppServiceSpec, BucketSpec, GitSourceSpec, LocalCommandSpec

from .interfaces import (
    BucketEnginePort,
    CommandEnginePort,
    OutputStorePort,
    ProvisioningEnginePort,
    ProvisioningResult,
)

logger = logging.getLogger(__name__)

DECLARATION_STATE_UNSUBMITTED: Final[str] = "unsubmitted"
DECLARATION_STATE_SUBMITTED: Final[str] = "submitted"
URL_OUTPUT_KEY: Final[str] = "url"
HELLO_MESSAGE_OUTPUT_KEY: Final[str] = "helloMessage"
BUCKET_NAME_OUTPUT_KEY: Final[str] = "bucketName"
BUCKET_ARN_OUTPUT_KEY: Final[str] = "bucketArn"


def provisioning_build_app_spec(settings: ProvisioningSettings, service_name: str = "web") -> AppResourceSpec:
    """Build the application specification from provisioning settings.

    Values are copied verbatim, without trimming or defaulting.

    Args:
        settings: Provisioning configuration values.
        service_name: Name of the single service component.

    Returns:
        AppResourceSpec: Fully populated resource specification.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return AppResourceSpec(
        name=settings.app_name,
        region=settings.region,
        services=(
            AppServiceSpec(
                name=service_name,
                git=GitSourceSpec(
                    repo_clone_url=settings.repo_clone_url,
                    branch=settings.branch,
                ),
                instance_count=settings.instance_count,
                instance_size_slug=settings.instance_size,
            ),
        ),
    )


def provisioning_build_hello_command_spec() -> LocalCommandSpec:
    """Build the `hello` local command echoing one line per lifecycle step."""

    return LocalCommandSpec(
        resource_name="hello",
        create="echo hello",
        update="echo hello again",
        delete="echo goodbye",
    )


def provisioning_build_bucket_spec(settings: BucketSettings, resource_name: str = "my-bucket") -> BucketSpec:
    """Build the bucket description with ownership tags.

    Args:
        settings: Bucket tag values.
        resource_name: Engine logical resource name.

    Returns:
        BucketSpec: Bucket description tagged with name, environment and manager.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return BucketSpec(
        resource_name=resource_name,
        tags=(
            ("Name", f"{settings.component_name}-bucket"),
            ("Environment", settings.environment),
            ("ManagedBy", "pulumi"),
        ),
    )


class _SingleSubmitDeclaration:
    """Shared `unsubmitted -> submitted` lifecycle, terminal on first success or error."""

    def __init__(self, engine: object, output_store: OutputStorePort):
        if engine is None:
            raise ValueError("engine must not be None")
        if output_store is None:
            raise ValueError("output_store must not be None")

        self._engine = engine
        self._output_store = output_store
        self._state = DECLARATION_STATE_UNSUBMITTED

    def declaration_state(self) -> str:
        """Return current declaration state.

        Returns:
            str: `unsubmitted` or `submitted`.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return self._state

    def _declaration_begin_submit(self) -> None:
        if self._state != DECLARATION_STATE_UNSUBMITTED:
            raise RuntimeError("provisioning declaration was already submitted")
        self._state = DECLARATION_STATE_SUBMITTED

    def _declaration_export(self, outputs: tuple[tuple[str, object], ...]) -> tuple[str, ...]:
        for key, value in outputs:
            self._output_store.output_export(key, value)
        return tuple(key for key, _ in outputs)


class ProvisioningDeclaration(_SingleSubmitDeclaration):
    """Application declaration exporting the engine-assigned `url`."""

    def __init__(
        self,
        engine: ProvisioningEnginePort,
        output_store: OutputStorePort,
        settings: ProvisioningSettings,
    ):
        """Initialize declaration dependencies.

        Args:
            engine: Provisioning engine receiving the specification.
            output_store: Output store receiving the `url` binding.
            settings: Provisioning configuration values.

        Returns:
            None: Initializer does not return values.

        Raises:
            ValueError: Raised when dependencies are missing.
        """

        super().__init__(engine=engine, output_store=output_store)
        if settings is None:
            raise ValueError("settings must not be None")
        self._settings = settings

    def declaration_submit(self) -> ProvisioningResult:
        """Submit the specification once and export the live URL on success.

        Engine failures propagate unchanged and nothing is exported. The
        declaration becomes terminal on the first success or the first error.

        Returns:
            ProvisioningResult: Submitted specification and engine handle.

        Raises:
            RuntimeError: Raised when the declaration was already submitted.
            Exception: Any engine failure, re-raised verbatim.
        """

        self._declaration_begin_submit()
        spec = provisioning_build_app_spec(self._settings)
        logger.info(
            "Submitting application spec to %s: name=%s region=%s",
            self._engine.engine_name(),
            spec.name,
            spec.region,
        )
        handle = self._engine.engine_submit_app(spec)
        output_keys = self._declaration_export(((URL_OUTPUT_KEY, handle.live_url),))
        return ProvisioningResult(state=self._state, spec=spec, handle=handle, output_keys=output_keys)


class LocalCommandDeclaration(_SingleSubmitDeclaration):
    """Local command declaration exporting the captured `helloMessage`."""

    def __init__(
        self,
        engine: CommandEnginePort,
        output_store: OutputStorePort,
        spec: LocalCommandSpec | None = None,
    ):
        super().__init__(engine=engine, output_store=output_store)
        self._spec = spec or provisioning_build_hello_command_spec()

    def declaration_submit(self) -> ProvisioningResult:
        """Submit the command once and export its stdout on success.

        Returns:
            ProvisioningResult: Submitted command and engine handle.

        Raises:
            RuntimeError: Raised when the declaration was already submitted.
            Exception: Any engine failure, re-raised verbatim.
        """

        self._declaration_begin_submit()
        logger.info("Submitting local command %s to %s", self._spec.resource_name, self._engine.engine_name())
        handle = self._engine.engine_submit_command(self._spec)
        output_keys = self._declaration_export(((HELLO_MESSAGE_OUTPUT_KEY, handle.stdout),))
        return ProvisioningResult(state=self._state, spec=self._spec, handle=handle, output_keys=output_keys)


class BucketDeclaration(_SingleSubmitDeclaration):
    """Bucket declaration exporting `bucketName` and `bucketArn`."""

    def __init__(
        self,
        engine: BucketEnginePort,
        output_store: OutputStorePort,
        settings: BucketSettings,
    ):
        super().__init__(engine=engine, output_store=output_store)
        if settings is None:
            raise ValueError("settings must not be None")
        self._settings = settings

    def declaration_submit(self) -> ProvisioningResult:
        """Submit the bucket once and export its name and ARN on success.

        Returns:
            ProvisioningResult: Submitted bucket description and engine handle.

        Raises:
            RuntimeError: Raised when the declaration was already submitted.
            Exception: Any engine failure, re-raised verbatim.
        """

        self._declaration_begin_submit()
        spec = provisioning_build_bucket_spec(self._settings)
        logger.info("Submitting bucket %s to %s", spec.resource_name, self._engine.engine_name())
        handle = self._engine.engine_submit_bucket(spec)
        output_keys = self._declaration_export(
            (
                (BUCKET_NAME_OUTPUT_KEY, handle.bucket_name),
                (BUCKET_ARN_OUTPUT_KEY, handle.bucket_arn),
            )
        )
        return ProvisioningResult(state=self._state, spec=spec, handle=handle, output_keys=output_keys)
