"""ELBv2 target group client."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

import boto3
import botocore.session
from botocore.config import Config
from botocore.credentials import CredentialResolver
from botocore.exceptions import BotoCoreError, ClientError

from albsync.auth.chain import DeferredCredentialResolver
from albsync.contracts.exceptions import LoadBalancerError
from albsync.contracts.load_balancer import LoadBalancerClient, TargetHealth
from albsync.contracts.target import Target

_LOG = logging.getLogger(__name__)

# Retries happen at reconciliation-cycle granularity, not per request.
_NO_RETRIES = Config(retries={"total_max_attempts": 1, "mode": "standard"})


def create_elbv2_client(region: str, credentials: CredentialResolver) -> Any:
    botocore_session = botocore.session.Session()
    botocore_session.register_component("credential_provider", DeferredCredentialResolver(credentials))
    session = boto3.Session(botocore_session=botocore_session, region_name=region)
    return session.client("elbv2", config=_NO_RETRIES)


class ELBv2LoadBalancerClient(LoadBalancerClient):
    """Async wrapper running blocking boto3 calls in a worker thread."""

    def __init__(self, client: Any) -> None:
        self._client = client

    async def describe_target_health(self, target_group_arn: str) -> list[TargetHealth]:
        response = await self._call("describe_target_health", TargetGroupArn=target_group_arn)
        descriptions: list[TargetHealth] = []
        for description in response.get("TargetHealthDescriptions", []):
            target = description.get("Target", {})
            health = description.get("TargetHealth", {})
            descriptions.append(
                TargetHealth(
                    target_id=target.get("Id", ""),
                    port=int(target.get("Port", 0)),
                    state=health.get("State", ""),
                )
            )
        return descriptions

    async def register_targets(self, target_group_arn: str, targets: list[Target]) -> None:
        if not targets:
            return
        await self._call(
            "register_targets",
            TargetGroupArn=target_group_arn,
            Targets=[target.as_alb_target() for target in targets],
        )

    async def deregister_targets(self, target_group_arn: str, targets: list[Target]) -> None:
        if not targets:
            return
        await self._call(
            "deregister_targets",
            TargetGroupArn=target_group_arn,
            Targets=[target.as_alb_target() for target in targets],
        )

    async def _call(self, operation: str, **kwargs: Any) -> dict[str, Any]:
        method: Callable[..., dict[str, Any]] = getattr(self._client, operation)
        _LOG.debug("ELBv2 %s on %s", operation, kwargs.get("TargetGroupArn"))
        try:
            return await asyncio.to_thread(method, **kwargs)
        except ClientError as exc:
            error = exc.response.get("Error", {})
            code = error.get("Code", "Unknown")
            message = error.get("Message", str(exc))
            raise LoadBalancerError(f"{operation} failed ({code}): {message}", operation=operation) from exc
        except BotoCoreError as exc:
            raise LoadBalancerError(f"{operation} failed: {exc}", operation=operation) from exc
