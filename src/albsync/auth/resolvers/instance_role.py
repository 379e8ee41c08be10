"""EC2 instance role credential provider."""

from __future__ import annotations

from botocore.credentials import CredentialProvider, Credentials, InstanceMetadataProvider
from botocore.utils import InstanceMetadataFetcher


class InstanceRoleCredentialProvider(CredentialProvider):
    METHOD = "albsync-instance-role"
    CANONICAL_NAME = "AlbsyncInstanceRole"

    def __init__(self, *, timeout: float = 1.0, num_attempts: int = 1) -> None:
        super().__init__()
        self._delegate = InstanceMetadataProvider(
            iam_role_fetcher=InstanceMetadataFetcher(timeout=timeout, num_attempts=num_attempts)
        )

    def load(self) -> Credentials | None:
        return self._delegate.load()
