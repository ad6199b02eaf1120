"""Configuration package for runtime settings and startup validation."""

from .logging import config_configure_logging
from .provisioning import (
    BucketSettings,
    ProvisioningConfigSourcePort,
    ProvisioningSettings,
    config_load_bucket_settings,
    config_load_provisioning_settings,
)
from .settings import ServiceSettings, SettingsLoadError, config_load_service_settings

__all__ = [
    "BucketSettings",
    "ProvisioningConfigSourcePort",
    "ProvisioningSettings",
    "ServiceSettings",
    "SettingsLoadError",
    "config_configure_logging",
    "config_load_bucket_settings",
    "config_load_provisioning_settings",
    "config_load_service_settings",
]
