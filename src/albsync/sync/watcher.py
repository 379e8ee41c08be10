"""Long-poll watcher turning catalog changes into target snapshots."""

from __future__ import annotations

import asyncio
import logging

from albsync.contracts.catalog import CatalogClient, CatalogResponse
from albsync.contracts.exceptions import CatalogError
from albsync.contracts.target import TargetSet

_LOG = logging.getLogger(__name__)

RETRY_DELAY_SECONDS = 15.0


class CatalogWatcher:
    """Emits one TargetSet per observed change of a catalog service.

    The wait index only moves forward on a successful query. Failed queries are
    retried forever after a fixed delay.
    """

    def __init__(
        self,
        catalog: CatalogClient,
        service_name: str,
        *,
        datacenter: str = "",
        label: str = "",
        retry_delay: float = RETRY_DELAY_SECONDS,
    ) -> None:
        self._catalog = catalog
        self._service_name = service_name
        self._datacenter = datacenter
        self._label = label or service_name
        self._retry_delay = retry_delay
        self.wait_index = 0

    async def run(self, queue: asyncio.Queue[TargetSet]) -> None:
        while True:
            snapshot = await self.next_snapshot()
            await queue.put(snapshot)

    async def next_snapshot(self) -> TargetSet:
        while True:
            try:
                response = await self._catalog.healthy_instances(
                    self._service_name,
                    datacenter=self._datacenter,
                    wait_index=self.wait_index,
                )
            except CatalogError as exc:
                _LOG.error(
                    "Error inspecting Consul service %r for target group %s: %s",
                    self._service_name,
                    self._label,
                    exc,
                )
                await self._sleep_retry()
                continue

            self._advance(response)
            return snapshot_from(response)

    def _advance(self, response: CatalogResponse) -> None:
        index = response.index
        if index < self.wait_index:
            _LOG.info(
                "Consul index for service %r went backwards (%d -> %d); resetting",
                self._service_name,
                self.wait_index,
                index,
            )
            index = 0
        elif index < 1:
            index = 1
        self.wait_index = index

    async def _sleep_retry(self) -> None:
        await asyncio.sleep(self._retry_delay)


def snapshot_from(response: CatalogResponse) -> TargetSet:
    # The Consul node name is assumed to be the EC2 instance id.
    snapshot = TargetSet()
    for instance in response.instances:
        snapshot.add(instance.node, instance.port)
    return snapshot
