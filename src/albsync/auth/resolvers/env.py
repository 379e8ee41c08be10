"""Environment credential provider."""

from __future__ import annotations

import os

from botocore.credentials import CredentialProvider, Credentials


class EnvCredentialProvider(CredentialProvider):
    METHOD = "albsync-env"
    CANONICAL_NAME = "AlbsyncEnvironment"

    def load(self) -> Credentials | None:
        access_key = (os.getenv("AWS_ACCESS_KEY_ID") or "").strip()
        secret_key = (os.getenv("AWS_SECRET_ACCESS_KEY") or "").strip()
        if not access_key or not secret_key:
            return None
        token = (os.getenv("AWS_SESSION_TOKEN") or os.getenv("AWS_SECURITY_TOKEN") or "").strip() or None
        return Credentials(access_key, secret_key, token, method=self.METHOD)
