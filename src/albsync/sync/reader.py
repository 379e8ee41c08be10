"""Current target group membership as seen by the load balancer."""

from __future__ import annotations

from albsync.contracts.load_balancer import LoadBalancerClient
from albsync.contracts.target import TargetSet


class TargetGroupReader:
    def __init__(self, load_balancer: LoadBalancerClient) -> None:
        self._load_balancer = load_balancer

    async def current_targets(self, target_group_arn: str) -> TargetSet:
        """Registered targets of the group, excluding those already draining.

        Reports membership, not health: unhealthy targets are included.
        """
        targets = TargetSet()
        for description in await self._load_balancer.describe_target_health(target_group_arn):
            if description.is_draining:
                continue
            targets.add_target(description.target)
        return targets
