"""Catalog and load balancer client implementations."""

from albsync.providers.consul import ConsulCatalogClient
from albsync.providers.dry_run import DryRunLoadBalancerClient
from albsync.providers.elbv2 import ELBv2LoadBalancerClient, create_elbv2_client
from albsync.providers.factory import create_catalog_client, create_load_balancer_client

__all__ = [
    "ConsulCatalogClient",
    "DryRunLoadBalancerClient",
    "ELBv2LoadBalancerClient",
    "create_catalog_client",
    "create_elbv2_client",
    "create_load_balancer_client",
]
