"""Client factories for one pairing."""

from __future__ import annotations

from albsync.auth import create_credential_resolver
from albsync.contracts.catalog import CatalogClient
from albsync.contracts.config import AWSConfig, ConsulConfig
from albsync.contracts.load_balancer import LoadBalancerClient
from albsync.providers.consul import ConsulCatalogClient
from albsync.providers.dry_run import DryRunLoadBalancerClient
from albsync.providers.elbv2 import ELBv2LoadBalancerClient, create_elbv2_client


def create_catalog_client(config: ConsulConfig | None) -> CatalogClient:
    return ConsulCatalogClient(config or ConsulConfig())


def create_load_balancer_client(
    config: AWSConfig | None,
    region: str,
    *,
    dry_run: bool = False,
) -> LoadBalancerClient:
    client: LoadBalancerClient = ELBv2LoadBalancerClient(
        create_elbv2_client(region, create_credential_resolver(config))
    )
    if dry_run:
        return DryRunLoadBalancerClient(client)
    return client
