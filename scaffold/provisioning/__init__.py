"""Provisioning layer package for resource declaration and engine boundaries."""

from .declaration import (
    BUCKET_ARN_OUTPUT_KEY,
    BUCKET_NAME_OUTPUT_KEY,
    DECLARATION_STATE_SUBMITTED,
    DECLARATION_STATE_UNSUBMITTED,
    HELLO_MESSAGE_OUTPUT_KEY,
    URL_OUTPUT_KEY,
    BucketDeclaration,
    LocalCommandDeclaration,
    ProvisioningDeclaration,
    provisioning_build_app_spec,
    provisioning_build_bucket_spec,
    provisioning_build_hello_command_spec,
)
from .interfaces import (
    BucketEnginePort,
    CommandEnginePort,
    OutputStorePort,
    ProvisionedAppHandle,
    ProvisionedBucketHandle,
    ProvisionedCommandHandle,
    ProvisioningEnginePort,
    ProvisioningResult,
)

__all__ = [
    "BUCKET_ARN_OUTPUT_KEY",
    "BUCKET_NAME_OUTPUT_KEY",
    "BucketDeclaration",
    "BucketEnginePort",
    "CommandEnginePort",
    "DECLARATION_STATE_SUBMITTED",
    "DECLARATION_STATE_UNSUBMITTED",
    "HELLO_MESSAGE_OUTPUT_KEY",
    "LocalCommandDeclaration",
    "OutputStorePort",
    "ProvisionedAppHandle",
    "ProvisionedBucketHandle",
    "ProvisionedCommandHandle",
    "ProvisioningDeclaration",
    "ProvisioningEnginePort",
    "ProvisioningResult",
    "URL_OUTPUT_KEY",
    "provisioning_build_app_spec",
    "provisioning_build_bucket_spec",
    "provisioning_build_hello_command_spec",
]
