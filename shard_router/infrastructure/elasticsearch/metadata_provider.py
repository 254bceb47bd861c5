# shard_router/infrastructure/elasticsearch/metadata_provider.py

from typing import Any, Mapping, Optional
from urllib.parse import quote

import httpx

from shard_router.config.settings import RouterSettings
from shard_router.domain.exceptions import MetadataError


class ElasticsearchMetadataProvider:
    """MetadataProvider over the store's REST API: index settings + cluster state metadata."""

    def __init__(
        self,
        base_url: str,
        *,
        username: Optional[str] = None,
        password: Optional[str] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        auth = httpx.BasicAuth(username, password or "") if username else None
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            auth=auth,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    @classmethod
    def from_settings(cls, settings: RouterSettings) -> "ElasticsearchMetadataProvider":
        return cls(
            settings.elasticsearch_url,
            username=settings.elasticsearch_username,
            password=settings.elasticsearch_password,
            timeout=settings.request_timeout_seconds,
        )

    async def _get_json(self, path: str, **params) -> Optional[dict[str, Any]]:
        try:
            response = await self._client.get(path, params=params or None)
        except httpx.HTTPError as e:
            raise MetadataError(f"Request to {path} failed: {e}") from e
        if response.status_code == 404:
            return None
        if response.is_error:
            raise MetadataError(
                f"Request to {path} failed with status {response.status_code}"
            )
        try:
            return response.json()
        except ValueError as e:
            raise MetadataError(f"Response from {path} is not valid JSON") from e

    async def get_index_settings(self, index_name: str) -> Optional[Mapping[str, Any]]:
        # GET /{index}/_settings -> {index: {"settings": {"index": {...}}}}
        body = await self._get_json(f"/{quote(index_name, safe='')}/_settings")
        if not isinstance(body, dict):
            return None
        index_data = body.get(index_name)
        if not isinstance(index_data, dict):
            return None
        settings = index_data.get("settings")
        if not isinstance(settings, dict) or not isinstance(settings.get("index"), dict):
            return None
        return settings["index"]

    async def get_routing_num_shards(self, index_name: str) -> Optional[int]:
        # GET /_cluster/state/metadata/{index} -> {"metadata": {"indices": {index: {...}}}}
        body = await self._get_json(f"/_cluster/state/metadata/{quote(index_name, safe='')}")
        if not isinstance(body, dict):
            return None
        indices = (body.get("metadata") or {}).get("indices") or {}
        return (indices.get(index_name) or {}).get("routing_num_shards")

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ElasticsearchMetadataProvider":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
