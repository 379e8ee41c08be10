"""Composition root: validate pairings, build clients, run workers."""

from __future__ import annotations

import asyncio
import logging

from albsync.contracts.config import SyncConfig
from albsync.contracts.exceptions import ConfigError
from albsync.sync.target_group import TargetGroup, build_target_group
from albsync.sync.worker import SyncWorker

_LOG = logging.getLogger(__name__)


def build_target_groups(config: SyncConfig, *, dry_run: bool = False) -> list[TargetGroup]:
    """Build one pairing per valid ``target_groups`` entry, skipping invalid ones."""
    target_groups: dict[str, TargetGroup] = {}

    for tg_config in config.target_groups:
        arn = tg_config.arn
        if not arn:
            _LOG.warning("skipping target group with empty ARN")
            continue
        if not tg_config.service:
            _LOG.warning("skipping target group %r: no 'service' specified", arn)
            continue
        if arn in target_groups:
            _LOG.warning("skipping duplicate declaration of target group %r", arn)
            continue

        try:
            target_group = build_target_group(tg_config, config.consul, config.aws, dry_run=dry_run)
        except ConfigError as exc:
            _LOG.warning("skipping target group %r: %s", arn, exc)
            continue

        target_groups[arn] = target_group

    if not target_groups:
        _LOG.warning("No valid target_groups found in config!")

    return list(target_groups.values())


class AlbSync:
    """Runs one SyncWorker per pairing, concurrently and independently."""

    def __init__(self, target_groups: list[TargetGroup]) -> None:
        self.workers = [SyncWorker(target_group) for target_group in target_groups]

    @classmethod
    def from_config(cls, config: SyncConfig, *, dry_run: bool = False) -> AlbSync:
        return cls(build_target_groups(config, dry_run=dry_run))

    async def run(self) -> None:
        """Run until cancelled. Returns only if every worker has stopped on its own."""
        if not self.workers:
            await asyncio.Event().wait()

        async with asyncio.TaskGroup() as group:
            for worker in self.workers:
                group.create_task(self._supervise(worker), name=f"worker:{worker.target_group.arn}")

    @staticmethod
    async def _supervise(worker: SyncWorker) -> None:
        # A crash in one pairing must not cancel its siblings.
        try:
            await worker.run()
        except Exception:
            _LOG.exception("sync worker for %s stopped unexpectedly", worker.target_group.arn)
