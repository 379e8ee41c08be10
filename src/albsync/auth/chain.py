"""Credentials resolved from the provider chain on first use."""

from __future__ import annotations

import threading

from botocore.credentials import Credentials, CredentialResolver, ReadOnlyCredentials
from botocore.exceptions import NoCredentialsError


class ChainCredentials(Credentials):
    """Walks the provider chain when a request is signed, until one source answers.

    Once a source has produced credentials they are kept; refreshable
    credentials (instance role) renew themselves.
    """

    def __init__(self, resolver: CredentialResolver) -> None:
        self._resolver = resolver
        self._resolved: Credentials | None = None
        self._lock = threading.Lock()
        self.method = "albsync-chain"

    def _credentials(self) -> Credentials:
        with self._lock:
            if self._resolved is None:
                self._resolved = self._resolver.load_credentials()
            if self._resolved is None:
                raise NoCredentialsError()
            return self._resolved

    def get_frozen_credentials(self) -> ReadOnlyCredentials:
        return self._credentials().get_frozen_credentials()

    @property
    def access_key(self) -> str:
        return self._credentials().access_key

    @property
    def secret_key(self) -> str:
        return self._credentials().secret_key

    @property
    def token(self) -> str | None:
        return self._credentials().token

    @property
    def account_id(self) -> str | None:
        # Read while building endpoint parameters; must not trigger a lookup.
        if self._resolved is None:
            return None
        return self._resolved.account_id


class DeferredCredentialResolver:
    """botocore ``credential_provider`` component that hands out ChainCredentials."""

    def __init__(self, resolver: CredentialResolver) -> None:
        self._resolver = resolver

    def load_credentials(self) -> ChainCredentials:
        return ChainCredentials(self._resolver)
