"""Configuration contracts."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

DEFAULT_CONSUL_ADDRESS = "127.0.0.1:8500"


def _env_bool(name: str) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return False
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _default_consul_address() -> str:
    return (os.getenv("CONSUL_HTTP_ADDR") or "").strip() or DEFAULT_CONSUL_ADDRESS


def _default_consul_token() -> str:
    return (os.getenv("CONSUL_HTTP_TOKEN") or "").strip()


def _default_consul_scheme() -> str:
    return "https" if _env_bool("CONSUL_HTTP_SSL") else "http"


def region_from_arn(arn: str) -> str:
    """Return the region segment of an ARN, or ``""`` when the ARN is malformed."""
    parts = arn.split(":")
    if len(parts) < 6 or parts[0] != "arn":
        return ""
    return parts[3]


class AWSConfig(BaseModel):
    access_key_id: str = ""
    secret_access_key: str = ""
    security_token: str = ""

    model_config = {"frozen": True, "extra": "forbid"}


class ConsulConfig(BaseModel):
    address: str = Field(default_factory=_default_consul_address)
    token: str = Field(default_factory=_default_consul_token)
    scheme: str = Field(default_factory=_default_consul_scheme)
    wait_seconds: int = Field(default=300, ge=1)

    model_config = {"frozen": True, "extra": "forbid"}

    @property
    def base_url(self) -> str:
        address = self.address.strip()
        if "://" in address:
            return address.rstrip("/")
        return f"{self.scheme}://{address}".rstrip("/")


class TargetGroupConfig(BaseModel):
    # Left unconstrained so one bad block is skipped rather than failing the file.
    arn: str = ""
    service: str = ""
    datacenter: str = ""

    model_config = {"frozen": True, "extra": "forbid", "str_strip_whitespace": True}

    @property
    def aws_region(self) -> str:
        return region_from_arn(self.arn)


class SyncConfig(BaseModel):
    aws: AWSConfig | None = None
    consul: ConsulConfig | None = None
    target_groups: list[TargetGroupConfig] = Field(default_factory=list)

    model_config = {"frozen": True, "extra": "forbid"}
