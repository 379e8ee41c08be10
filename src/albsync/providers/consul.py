"""Consul health API client."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from albsync.contracts.catalog import CatalogClient, CatalogResponse, ServiceInstance
from albsync.contracts.config import ConsulConfig
from albsync.contracts.exceptions import CatalogError

_LOG = logging.getLogger(__name__)

_INDEX_HEADER = "X-Consul-Index"
_TOKEN_HEADER = "X-Consul-Token"


class ConsulCatalogClient(CatalogClient):
    """Blocking queries against ``/v1/health/service/<name>``.

    Consul may hold a blocking query for up to ``wait + wait/16``; the read
    timeout leaves room for that.
    """

    def __init__(
        self,
        config: ConsulConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        headers = {"Accept": "application/json"}
        if config.token:
            headers[_TOKEN_HEADER] = config.token
        read_timeout = config.wait_seconds + config.wait_seconds / 16 + 10.0
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            headers=headers,
            timeout=httpx.Timeout(10.0, read=read_timeout),
            transport=transport,
        )

    async def healthy_instances(self, service: str, *, datacenter: str = "", wait_index: int = 0) -> CatalogResponse:
        params: dict[str, Any] = {"passing": "1"}
        if datacenter:
            params["dc"] = datacenter
        if wait_index > 0:
            params["index"] = str(wait_index)
            params["wait"] = f"{self._config.wait_seconds}s"

        try:
            response = await self._client.get(f"/v1/health/service/{service}", params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise CatalogError(
                f"Consul returned HTTP {exc.response.status_code} for service {service!r}: {exc.response.text.strip()}"
            ) from exc
        except httpx.HTTPError as exc:
            raise CatalogError(f"Consul request for service {service!r} failed: {exc}") from exc
        except ValueError as exc:
            raise CatalogError(f"Consul returned invalid JSON for service {service!r}") from exc

        raw_index = response.headers.get(_INDEX_HEADER)
        if raw_index is None:
            raise CatalogError(f"Consul response for service {service!r} has no {_INDEX_HEADER} header")
        try:
            index = int(raw_index)
        except ValueError as exc:
            raise CatalogError(f"Consul returned a non-numeric index {raw_index!r}") from exc

        if not isinstance(payload, list):
            raise CatalogError(f"Consul health response for service {service!r} is not a list")

        instances = [self._parse_entry(entry, service=service) for entry in payload]
        _LOG.debug("Consul service %r at index %d has %d passing instance(s)", service, index, len(instances))
        return CatalogResponse(instances=instances, index=index)

    async def aclose(self) -> None:
        await self._client.aclose()

    @staticmethod
    def _parse_entry(entry: Any, *, service: str) -> ServiceInstance:
        try:
            node = entry["Node"]
            svc = entry["Service"]
            return ServiceInstance(
                node=node["Node"],
                port=int(svc["Port"]),
                address=svc.get("Address") or node.get("Address") or "",
                service_id=svc.get("ID") or "",
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise CatalogError(f"malformed health entry for service {service!r}: {exc}") from exc
