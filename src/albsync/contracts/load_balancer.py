"""Load balancer adapter contract."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel

from albsync.contracts.target import Target

DRAINING = "draining"


class TargetHealth(BaseModel):
    target_id: str
    port: int
    state: str

    model_config = {"frozen": True}

    @property
    def target(self) -> Target:
        return Target(self.target_id, self.port)

    @property
    def is_draining(self) -> bool:
        return self.state == DRAINING


class LoadBalancerClient(ABC):
    """Target membership operations for ALB target groups.

    Every method raises :class:`LoadBalancerError` on failure.
    """

    @abstractmethod
    async def describe_target_health(self, target_group_arn: str) -> list[TargetHealth]: ...

    @abstractmethod
    async def register_targets(self, target_group_arn: str, targets: list[Target]) -> None: ...

    @abstractmethod
    async def deregister_targets(self, target_group_arn: str, targets: list[Target]) -> None: ...
