"""Public contracts for albsync."""

from albsync.contracts.catalog import CatalogClient, CatalogResponse, ServiceInstance
from albsync.contracts.config import AWSConfig, ConsulConfig, SyncConfig, TargetGroupConfig, region_from_arn
from albsync.contracts.exceptions import AlbSyncError, CatalogError, ConfigError, LoadBalancerError
from albsync.contracts.load_balancer import DRAINING, LoadBalancerClient, TargetHealth
from albsync.contracts.target import Target, TargetSet

__all__ = [
    "DRAINING",
    "AWSConfig",
    "AlbSyncError",
    "CatalogClient",
    "CatalogError",
    "CatalogResponse",
    "ConfigError",
    "ConsulConfig",
    "LoadBalancerClient",
    "LoadBalancerError",
    "ServiceInstance",
    "SyncConfig",
    "Target",
    "TargetGroupConfig",
    "TargetHealth",
    "TargetSet",
    "region_from_arn",
]
