"""Exception hierarchy for albsync."""

from __future__ import annotations


class AlbSyncError(Exception):
    """Base exception for all albsync errors."""


class ConfigError(AlbSyncError):
    """Configuration loading or validation failure."""


class CatalogError(AlbSyncError):
    """Service catalog query failure."""


class LoadBalancerError(AlbSyncError):
    """Load balancer API call failure."""

    def __init__(self, message: str, *, operation: str | None = None) -> None:
        super().__init__(message)
        self.operation = operation
