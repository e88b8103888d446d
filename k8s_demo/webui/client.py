from __future__ import annotations

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from k8s_demo.catalog.schemas import HealthResponse, ItemListResponse, ServerInfoResponse


ModelT = TypeVar("ModelT", bound=BaseModel)


class BackendUnavailableError(RuntimeError):
    """The catalog service could not be reached or answered with an error."""


class CatalogClient:
    """Async client for the catalog service.

    Every failure mode (connection error, non-2xx status, malformed body) is
    reported as BackendUnavailableError so callers handle a single type.
    """

    def __init__(
        self,
        base_url: str,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout_s: float | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        kwargs: dict[str, Any] = {"base_url": self.base_url, "transport": transport}
        if timeout_s is not None:
            kwargs["timeout"] = timeout_s
        self._client = httpx.AsyncClient(**kwargs)

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get(self, path: str, model: type[ModelT]) -> ModelT:
        try:
            response = await self._client.get(path)
            response.raise_for_status()
            return model.model_validate(response.json())
        except httpx.HTTPError as e:
            raise BackendUnavailableError(f"GET {path} failed: {e}") from e
        except (ValidationError, ValueError) as e:
            raise BackendUnavailableError(f"GET {path} returned an invalid body: {e}") from e

    async def get_info(self) -> ServerInfoResponse:
        return await self._get("/api/info", ServerInfoResponse)

    async def list_items(self) -> ItemListResponse:
        return await self._get("/api/items", ItemListResponse)

    async def health(self) -> HealthResponse:
        return await self._get("/health", HealthResponse)
