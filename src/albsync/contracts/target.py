"""Target value types and set algebra."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Target:
    """One load-balanced endpoint: an instance plus the port it serves on."""

    instance_id: str
    port: int

    def as_alb_target(self) -> dict[str, str | int]:
        return {"Id": self.instance_id, "Port": self.port}

    def __str__(self) -> str:
        return f"{self.instance_id}:{self.port}"


class TargetSet:
    """Value-keyed set of targets.

    ``union`` and ``difference`` return new sets; ``add`` mutates in place and
    is only meant for building a set incrementally.
    """

    __slots__ = ("_targets",)

    def __init__(self, targets: Iterable[Target] = ()) -> None:
        self._targets: set[Target] = set(targets)

    def add(self, instance_id: str, port: int) -> None:
        self._targets.add(Target(instance_id, port))

    def add_target(self, target: Target) -> None:
        self._targets.add(target)

    def has(self, instance_id: str, port: int) -> bool:
        return Target(instance_id, port) in self._targets

    def contains(self, target: Target) -> bool:
        return target in self._targets

    def union(self, other: TargetSet) -> TargetSet:
        return TargetSet(self._targets | other._targets)

    def difference(self, other: TargetSet) -> TargetSet:
        return TargetSet(self._targets - other._targets)

    def to_list(self) -> list[Target]:
        return sorted(self._targets)

    def as_alb_targets(self) -> list[dict[str, str | int]]:
        return [target.as_alb_target() for target in self.to_list()]

    def __contains__(self, target: object) -> bool:
        return target in self._targets

    def __iter__(self) -> Iterator[Target]:
        return iter(self.to_list())

    def __len__(self) -> int:
        return len(self._targets)

    def __bool__(self) -> bool:
        return bool(self._targets)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TargetSet):
            return NotImplemented
        return self._targets == other._targets

    __hash__ = None  # type: ignore[assignment]

    def __or__(self, other: TargetSet) -> TargetSet:
        return self.union(other)

    def __sub__(self, other: TargetSet) -> TargetSet:
        return self.difference(other)

    def __repr__(self) -> str:
        return f"TargetSet({self.to_list()!r})"

    def __str__(self) -> str:
        return "{" + ", ".join(str(target) for target in self.to_list()) + "}"
