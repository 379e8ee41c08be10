"""Public API surface for albsync."""

from albsync.config import load_config_file, load_config_files
from albsync.contracts import (
    AlbSyncError,
    AWSConfig,
    CatalogClient,
    CatalogError,
    CatalogResponse,
    ConfigError,
    ConsulConfig,
    LoadBalancerClient,
    LoadBalancerError,
    ServiceInstance,
    SyncConfig,
    Target,
    TargetGroupConfig,
    TargetHealth,
    TargetSet,
)
from albsync.service import AlbSync, build_target_groups
from albsync.sync import (
    CatalogWatcher,
    ReconcileResult,
    Reconciler,
    SyncWorker,
    TargetChanges,
    TargetGroup,
    TargetGroupReader,
    compute_changes,
)

__all__ = [
    "AWSConfig",
    "AlbSync",
    "AlbSyncError",
    "CatalogClient",
    "CatalogError",
    "CatalogResponse",
    "CatalogWatcher",
    "ConfigError",
    "ConsulConfig",
    "LoadBalancerClient",
    "LoadBalancerError",
    "ReconcileResult",
    "Reconciler",
    "ServiceInstance",
    "SyncConfig",
    "SyncWorker",
    "Target",
    "TargetChanges",
    "TargetGroup",
    "TargetGroupConfig",
    "TargetGroupReader",
    "TargetHealth",
    "TargetSet",
    "build_target_groups",
    "compute_changes",
    "load_config_file",
    "load_config_files",
]
