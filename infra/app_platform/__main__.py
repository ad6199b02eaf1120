"""Pulumi program declaring the DigitalOcean App Platform application."""

import pulumi

from scaffold.bootstrap import bootstrap_create_provisioning_declaration
from scaffold.config import config_configure_logging

config_configure_logging()
bootstrap_create_provisioning_declaration(config_source=pulumi.Config()).declaration_submit()
