"""Auth module public exports."""

from albsync.auth.chain import ChainCredentials, DeferredCredentialResolver
from albsync.auth.factory import create_credential_resolver, credential_providers

__all__ = ["ChainCredentials", "DeferredCredentialResolver", "create_credential_resolver", "credential_providers"]
