"""Read-through load balancer client that only logs mutations."""

from __future__ import annotations

import logging

from albsync.contracts.load_balancer import LoadBalancerClient, TargetHealth
from albsync.contracts.target import Target

_LOG = logging.getLogger(__name__)


class DryRunLoadBalancerClient(LoadBalancerClient):
    def __init__(self, inner: LoadBalancerClient) -> None:
        self._inner = inner

    async def describe_target_health(self, target_group_arn: str) -> list[TargetHealth]:
        return await self._inner.describe_target_health(target_group_arn)

    async def register_targets(self, target_group_arn: str, targets: list[Target]) -> None:
        _LOG.info("[dry-run] would register %s with %s", _render(targets), target_group_arn)

    async def deregister_targets(self, target_group_arn: str, targets: list[Target]) -> None:
        _LOG.info("[dry-run] would deregister %s from %s", _render(targets), target_group_arn)


def _render(targets: list[Target]) -> str:
    return "{" + ", ".join(str(target) for target in targets) + "}"
