"""Static credential provider backed by the ``aws`` config block."""

from __future__ import annotations

from botocore.credentials import CredentialProvider, Credentials

from albsync.contracts.config import AWSConfig


class StaticCredentialProvider(CredentialProvider):
    METHOD = "albsync-static"
    CANONICAL_NAME = "AlbsyncStatic"

    def __init__(self, config: AWSConfig) -> None:
        super().__init__()
        self._config = config

    def load(self) -> Credentials | None:
        access_key = self._config.access_key_id.strip()
        secret_key = self._config.secret_access_key.strip()
        if not access_key or not secret_key:
            return None
        token = self._config.security_token.strip() or None
        return Credentials(access_key, secret_key, token, method=self.METHOD)
