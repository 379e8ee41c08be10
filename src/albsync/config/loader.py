"""Config file loading and merging."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from albsync.contracts.config import SyncConfig
from albsync.contracts.exceptions import ConfigError


def load_config_file(path: str | Path) -> SyncConfig:
    config_path = Path(path).expanduser()

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        return SyncConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed to read {config_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"syntax error in {config_path}: {exc}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config in {config_path}: {exc}") from exc


def load_config_files(paths: Iterable[str | Path]) -> SyncConfig:
    """Load several config files and merge them into one SyncConfig.

    Target groups are concatenated in file order. The ``aws`` and ``consul``
    blocks may each be declared in at most one file.
    """
    merged: dict[str, Any] = {"aws": None, "consul": None, "target_groups": []}
    sources: dict[str, Path] = {}

    for path in paths:
        one = load_config_file(path)
        merged["target_groups"].extend(one.target_groups)

        for block in ("aws", "consul"):
            value = getattr(one, block)
            if value is None:
                continue
            if block in sources:
                raise ConfigError(f"'{block}' block appears twice, in both {sources[block]} and {path}")
            sources[block] = Path(path)
            merged[block] = value

    return SyncConfig(**merged)
