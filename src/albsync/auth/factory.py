"""AWS credential chain factory."""

from __future__ import annotations

from botocore.credentials import CredentialProvider, CredentialResolver

from albsync.auth.resolvers.env import EnvCredentialProvider
from albsync.auth.resolvers.instance_role import InstanceRoleCredentialProvider
from albsync.auth.resolvers.static import StaticCredentialProvider
from albsync.contracts.config import AWSConfig


def credential_providers(config: AWSConfig | None) -> list[CredentialProvider]:
    """Ordered credential sources: static config, then environment, then instance role."""
    providers: list[CredentialProvider] = []
    if config is not None:
        providers.append(StaticCredentialProvider(config))
    providers.append(EnvCredentialProvider())
    providers.append(InstanceRoleCredentialProvider())
    return providers


def create_credential_resolver(config: AWSConfig | None) -> CredentialResolver:
    return CredentialResolver(providers=credential_providers(config))
