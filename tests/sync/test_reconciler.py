from __future__ import annotations

import pytest

from albsync.contracts.target import Target, TargetSet
from albsync.sync.reconciler import Reconciler, compute_changes
from tests.fakes.load_balancer import TG_ARN, FakeLoadBalancer


def make_set(*members: tuple[str, int]) -> TargetSet:
    return TargetSet(Target(instance_id, port) for instance_id, port in members)


X, Y, Z = ("i-x", 80), ("i-y", 80), ("i-z", 80)


def test_compute_changes_diffs_desired_against_observed() -> None:
    changes = compute_changes(make_set(X, Y), make_set(Y, Z))

    assert changes.to_add == make_set(X)
    assert changes.to_remove == make_set(Z)
    assert not changes.is_empty


def test_compute_changes_is_repeatable() -> None:
    desired = make_set(X, Y)
    observed = make_set(Y, Z)

    assert compute_changes(desired, observed) == compute_changes(desired, observed)


def test_compute_changes_is_empty_when_in_sync() -> None:
    changes = compute_changes(make_set(X, Y), make_set(X, Y))

    assert changes.is_empty


@pytest.mark.asyncio
async def test_reconcile_adds_then_removes() -> None:
    lb = FakeLoadBalancer()
    reconciler = Reconciler(lb, TG_ARN)

    result = await reconciler.reconcile(make_set(X, Y), make_set(Y, Z))

    assert lb.register_calls == [(TG_ARN, [Target(*X)])]
    assert lb.deregister_calls == [(TG_ARN, [Target(*Z)])]
    assert result.added == make_set(X)
    assert result.removed == make_set(Z)
    assert result.ok
    assert not result.removals_skipped


@pytest.mark.asyncio
async def test_reconcile_in_sync_issues_no_calls() -> None:
    lb = FakeLoadBalancer()

    result = await Reconciler(lb, TG_ARN).reconcile(make_set(X), make_set(X))

    assert lb.register_calls == []
    assert lb.deregister_calls == []
    assert result.changes.is_empty
    assert result.ok


@pytest.mark.asyncio
async def test_reconcile_only_removals_skips_register() -> None:
    lb = FakeLoadBalancer()

    result = await Reconciler(lb, TG_ARN).reconcile(make_set(X), make_set(X, Z))

    assert lb.register_calls == []
    assert lb.deregister_calls == [(TG_ARN, [Target(*Z)])]
    assert result.removed == make_set(Z)


@pytest.mark.asyncio
async def test_register_failure_suppresses_removals() -> None:
    lb = FakeLoadBalancer()
    lb.fail_register = True

    result = await Reconciler(lb, TG_ARN).reconcile(make_set(X, Y), make_set(Y, Z))

    assert len(lb.register_calls) == 1
    assert lb.deregister_calls == []
    assert result.add_error is not None
    assert result.removals_skipped
    assert not result.added
    assert not result.removed
    assert not result.ok


@pytest.mark.asyncio
async def test_register_failure_without_removals_does_not_flag_skip() -> None:
    lb = FakeLoadBalancer()
    lb.fail_register = True

    result = await Reconciler(lb, TG_ARN).reconcile(make_set(X), TargetSet())

    assert result.add_error is not None
    assert not result.removals_skipped


@pytest.mark.asyncio
async def test_deregister_failure_is_reported_after_successful_add() -> None:
    lb = FakeLoadBalancer()
    lb.fail_deregister = True

    result = await Reconciler(lb, TG_ARN).reconcile(make_set(X, Y), make_set(Y, Z))

    assert result.added == make_set(X)
    assert not result.removed
    assert result.remove_error is not None
    assert lb.deregister_calls == [(TG_ARN, [Target(*Z)])]
