"""Target diffing and the add-before-remove mutation protocol."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from albsync.contracts.exceptions import LoadBalancerError
from albsync.contracts.load_balancer import LoadBalancerClient
from albsync.contracts.target import TargetSet

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class TargetChanges:
    to_add: TargetSet
    to_remove: TargetSet

    @property
    def is_empty(self) -> bool:
        return not self.to_add and not self.to_remove


@dataclass
class ReconcileResult:
    changes: TargetChanges
    added: TargetSet = field(default_factory=TargetSet)
    removed: TargetSet = field(default_factory=TargetSet)
    add_error: LoadBalancerError | None = None
    remove_error: LoadBalancerError | None = None
    removals_skipped: bool = False

    @property
    def ok(self) -> bool:
        return self.add_error is None and self.remove_error is None


def compute_changes(desired: TargetSet, observed: TargetSet) -> TargetChanges:
    all_targets = desired.union(observed)
    return TargetChanges(
        to_add=all_targets.difference(observed),
        to_remove=all_targets.difference(desired),
    )


class Reconciler:
    """Applies one snapshot's changes to a target group.

    Additions go first. If they fail, removals are skipped for the cycle so a
    failing register call can never leave the group with no targets.
    """

    def __init__(self, load_balancer: LoadBalancerClient, target_group_arn: str) -> None:
        self._load_balancer = load_balancer
        self._arn = target_group_arn

    async def reconcile(self, desired: TargetSet, observed: TargetSet) -> ReconcileResult:
        return await self.apply(compute_changes(desired, observed))

    async def apply(self, changes: TargetChanges) -> ReconcileResult:
        result = ReconcileResult(changes=changes)

        if changes.to_add:
            try:
                await self._load_balancer.register_targets(self._arn, changes.to_add.to_list())
            except LoadBalancerError as exc:
                _LOG.error("failed to add targets %s to %s: %s", changes.to_add, self._arn, exc)
                result.add_error = exc
                if changes.to_remove:
                    _LOG.warning(
                        "skipping removal of %s from %s due to earlier add failure",
                        changes.to_remove,
                        self._arn,
                    )
                    result.removals_skipped = True
                return result
            result.added = changes.to_add
            _LOG.info("added %s to %s", changes.to_add, self._arn)

        if changes.to_remove:
            try:
                await self._load_balancer.deregister_targets(self._arn, changes.to_remove.to_list())
            except LoadBalancerError as exc:
                _LOG.error("failed to remove targets %s from %s: %s", changes.to_remove, self._arn, exc)
                result.remove_error = exc
                return result
            result.removed = changes.to_remove
            _LOG.info("removed %s from %s", changes.to_remove, self._arn)

        return result
