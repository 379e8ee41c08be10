"""Per-pairing sync loop."""

from __future__ import annotations

import asyncio
import logging

from albsync.contracts.exceptions import LoadBalancerError
from albsync.contracts.target import TargetSet
from albsync.sync.reader import TargetGroupReader
from albsync.sync.reconciler import ReconcileResult, Reconciler
from albsync.sync.target_group import TargetGroup
from albsync.sync.watcher import RETRY_DELAY_SECONDS, CatalogWatcher

_LOG = logging.getLogger(__name__)


class SyncWorker:
    """Owns one pairing: a watcher task feeding a single-slot queue, and a
    consumer loop that reconciles each snapshot before taking the next.

    Runs until cancelled; cancellation takes effect at the next await.
    """

    def __init__(self, target_group: TargetGroup, *, retry_delay: float = RETRY_DELAY_SECONDS) -> None:
        self.target_group = target_group
        self.watcher = CatalogWatcher(
            target_group.catalog,
            target_group.service_name,
            datacenter=target_group.datacenter,
            label=target_group.arn,
            retry_delay=retry_delay,
        )
        self._reader = TargetGroupReader(target_group.load_balancer)
        self._reconciler = Reconciler(target_group.load_balancer, target_group.arn)

    async def run(self) -> None:
        tg = self.target_group
        _LOG.info("Syncing Consul service %r to ALB target group %s", tg.service_name, tg.arn)

        queue: asyncio.Queue[TargetSet] = asyncio.Queue(maxsize=1)
        try:
            async with asyncio.TaskGroup() as group:
                group.create_task(self.watcher.run(queue), name=f"watch:{tg.service_name}")
                group.create_task(self._consume(queue), name=f"sync:{tg.arn}")
        finally:
            await tg.catalog.aclose()

    async def _consume(self, queue: asyncio.Queue[TargetSet]) -> None:
        while True:
            desired = await queue.get()
            await self.sync_once(desired)
            queue.task_done()

    async def sync_once(self, desired: TargetSet) -> ReconcileResult | None:
        """One reconciliation cycle. Returns None when the cycle was abandoned."""
        arn = self.target_group.arn
        _LOG.debug("Consul service %r now has %s", self.target_group.service_name, desired)

        try:
            observed = await self._reader.current_targets(arn)
        except LoadBalancerError as exc:
            _LOG.error("failed to get current targets for %s: %s", arn, exc)
            return None

        result = await self._reconciler.reconcile(desired, observed)
        if result.changes.is_empty:
            _LOG.debug("%s already matches Consul service %r", arn, self.target_group.service_name)
        return result
