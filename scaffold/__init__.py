"""Skeleton templates: a Pulumi provisioning declaration and a static responder service."""
