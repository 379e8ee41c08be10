"""Reconciliation engine."""

from albsync.sync.reader import TargetGroupReader
from albsync.sync.reconciler import ReconcileResult, Reconciler, TargetChanges, compute_changes
from albsync.sync.target_group import TargetGroup, build_target_group
from albsync.sync.watcher import RETRY_DELAY_SECONDS, CatalogWatcher, snapshot_from
from albsync.sync.worker import SyncWorker

__all__ = [
    "RETRY_DELAY_SECONDS",
    "CatalogWatcher",
    "ReconcileResult",
    "Reconciler",
    "SyncWorker",
    "TargetChanges",
    "TargetGroup",
    "TargetGroupReader",
    "build_target_group",
    "compute_changes",
    "snapshot_from",
]
