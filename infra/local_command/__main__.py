"""Pulumi program declaring the `hello` local command."""

from scaffold.bootstrap import bootstrap_create_local_command_declaration
from scaffold.config import config_configure_logging

config_configure_logging()
bootstrap_create_local_command_declaration().declaration_submit()
