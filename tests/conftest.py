"""Shared test fixtures for albsync tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from albsync.sync.target_group import TargetGroup
from tests.fakes.catalog import FakeCatalog
from tests.fakes.load_balancer import TG_ARN, FakeLoadBalancer


@pytest.fixture
def load_balancer() -> FakeLoadBalancer:
    return FakeLoadBalancer()


@pytest.fixture
def make_target_group(load_balancer: FakeLoadBalancer):
    def _make(catalog: FakeCatalog, *, arn: str = TG_ARN, service: str = "web") -> TargetGroup:
        return TargetGroup(
            arn=arn,
            region="us-east-1",
            service_name=service,
            datacenter="dc1",
            load_balancer=load_balancer,
            catalog=catalog,
        )

    return _make


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a JSON config payload and return its path."""

    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        text = payload if isinstance(payload, str) else json.dumps(payload)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
