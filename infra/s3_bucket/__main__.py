"""Pulumi program declaring the tagged S3 bucket."""

import pulumi

from scaffold.bootstrap import bootstrap_create_bucket_declaration
from scaffold.config import config_configure_logging

config_configure_logging()
bootstrap_create_bucket_declaration(
    config_source=pulumi.Config(),
    project_name=pulumi.get_project(),
    stack_name=pulumi.get_stack(),
).declaration_submit()
