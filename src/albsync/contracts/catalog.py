"""Service catalog adapter contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from pydantic import BaseModel, Field


class ServiceInstance(BaseModel):
    """One passing instance of a catalog service."""

    node: str
    port: int
    address: str = ""
    service_id: str = ""

    model_config = {"frozen": True}


class CatalogResponse(BaseModel):
    instances: list[ServiceInstance] = Field(default_factory=list)
    index: int = 0


class CatalogClient(ABC):
    async def __aenter__(self) -> CatalogClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    @abstractmethod
    async def healthy_instances(self, service: str, *, datacenter: str = "", wait_index: int = 0) -> CatalogResponse:
        """Blocking query for the passing instances of ``service``.

        Returns once the catalog index moves past ``wait_index`` or the server-side
        wait elapses. Raises :class:`CatalogError` on any failure.
        """

    async def aclose(self) -> None:
        return None
