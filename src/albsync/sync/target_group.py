"""Catalog service to target group pairing."""

from __future__ import annotations

from dataclasses import dataclass

from botocore.exceptions import BotoCoreError

from albsync.contracts.catalog import CatalogClient
from albsync.contracts.config import AWSConfig, ConsulConfig, TargetGroupConfig
from albsync.contracts.exceptions import ConfigError
from albsync.contracts.load_balancer import LoadBalancerClient
from albsync.providers.factory import create_catalog_client, create_load_balancer_client


@dataclass(frozen=True)
class TargetGroup:
    """One Consul service kept in sync with one ALB target group."""

    arn: str
    region: str
    service_name: str
    datacenter: str
    load_balancer: LoadBalancerClient
    catalog: CatalogClient


def build_target_group(
    config: TargetGroupConfig,
    consul_config: ConsulConfig | None,
    aws_config: AWSConfig | None,
    *,
    dry_run: bool = False,
) -> TargetGroup:
    region = config.aws_region
    if not region:
        raise ConfigError("ARN malformed, so couldn't extract region name")

    try:
        load_balancer = create_load_balancer_client(aws_config, region, dry_run=dry_run)
    except (BotoCoreError, ValueError) as exc:
        raise ConfigError(f"failed to create AWS client: {exc}") from exc

    try:
        catalog = create_catalog_client(consul_config)
    except ValueError as exc:
        raise ConfigError(f"consul config error: {exc}") from exc

    return TargetGroup(
        arn=config.arn,
        region=region,
        service_name=config.service,
        datacenter=config.datacenter,
        load_balancer=load_balancer,
        catalog=catalog,
    )
