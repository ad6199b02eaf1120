"""Typed domain models shared across runtime layers.

This module provides the data contracts handed from the provisioning
declaration to the provisioning engine, plus the static responder profile
consumed by the minimal service.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GitSourceSpec:
    """Source repository reference for one deployed service.

    Attributes:
        repo_clone_url: Repository clone URL.
        branch: Branch to build and deploy.
    """

    repo_clone_url: str
    branch: str


@dataclass(frozen=True)
class AppServiceSpec:
    """One service definition inside an application resource specification.

    Attributes:
        name: Service component name.
        git: Source repository reference.
        instance_count: Number of running instances.
        instance_size_slug: Platform instance size slug.
    """

    name: str
    git: GitSourceSpec
    instance_count: int
    instance_size_slug: str


@dataclass(frozen=True)
class AppResourceSpec:
    """Declarative description of the application submitted to the engine.

    Every field is required, so an instance is always fully populated.

    Attributes:
        name: Application name.
        region: Platform region slug.
        services: Service definitions, at least one.
    """

    name: str
    region: str
    services: tuple[AppServiceSpec, ...]


@dataclass(frozen=True)
class StaticResponderProfile:
    """Configuration of the single-route static responder service.

    Attributes:
        profile_name: Stable profile identifier.
        default_port: Listener port used when no override applies.
        response_body: Exact plain-text body returned by `GET /`.
        reads_port_environment: Whether `PORT` may override the default port.
    """

    profile_name: str
    default_port: int
    response_body: str
    reads_port_environment: bool


@dataclass(frozen=True)
class LocalCommandSpec:
    """Shell commands run on the provisioning host across a resource lifecycle.

    Attributes:
        resource_name: Engine logical resource name.
        create: Command run when the resource is created.
        update: Command run when the resource is updated.
        delete: Command run when the resource is deleted.
    """

    resource_name: str
    create: str
    update: str
    delete: str


@dataclass(frozen=True)
class BucketSpec:
    """Object storage bucket description.

    Attributes:
        resource_name: Engine logical resource name.
        tags: Ordered tag key/value pairs.
    """

    resource_name: str
    tags: tuple[tuple[str, str], ...]
