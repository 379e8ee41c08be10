"""Concrete credential providers."""

from albsync.auth.resolvers.env import EnvCredentialProvider
from albsync.auth.resolvers.instance_role import InstanceRoleCredentialProvider
from albsync.auth.resolvers.static import StaticCredentialProvider

__all__ = ["EnvCredentialProvider", "InstanceRoleCredentialProvider", "StaticCredentialProvider"]
