"""Metadata resolution: index settings + cluster metadata -> Topology. One await per source, no retries."""

import logging
from typing import Any, Mapping, Optional, Protocol

from pydantic import ValidationError as PydanticValidationError

from shard_router.domain.exceptions import ConfigurationError, MetadataError
from shard_router.domain.models.topology import Topology
from shard_router.domain.schemas.index_settings import ClusterIndexMetadata, IndexShardSettings

logger = logging.getLogger(__name__)


class MetadataProvider(Protocol):
    """Source of index topology (e.g. the store's REST API). Injected."""

    async def get_index_settings(self, index_name: str) -> Optional[Mapping[str, Any]]: ...
    async def get_routing_num_shards(self, index_name: str) -> Optional[int]: ...


class StaticMetadataProvider:
    """In-memory provider: index_name -> settings block / routing_num_shards. For tests or fixed topologies."""

    def __init__(
        self,
        index_settings: Optional[dict[str, Mapping[str, Any]]] = None,
        routing_num_shards: Optional[dict[str, int]] = None,
    ) -> None:
        self._index_settings = dict(index_settings or {})
        self._routing_num_shards = dict(routing_num_shards or {})

    async def get_index_settings(self, index_name: str) -> Optional[Mapping[str, Any]]:
        return self._index_settings.get(index_name)

    async def get_routing_num_shards(self, index_name: str) -> Optional[int]:
        return self._routing_num_shards.get(index_name)


class MetadataResolver:
    """Resolve an index's Topology from a MetadataProvider."""

    def __init__(self, provider: MetadataProvider) -> None:
        self._provider = provider

    async def resolve(self, index_name: str) -> Topology:
        """
        Fetch shard count and partition size from index settings, routing shard count
        from cluster metadata (defaulting to the shard count), then derive the routing factor.
        Raises MetadataError on any failure, chained to the cause.
        """
        try:
            raw_settings = await self._provider.get_index_settings(index_name)
        except MetadataError:
            raise
        except Exception as e:
            raise MetadataError(
                f"Failed to load metadata for index '{index_name}': {e}"
            ) from e
        if raw_settings is None:
            raise MetadataError(
                f"Failed to load metadata for index '{index_name}': could not find settings"
            )

        try:
            settings = IndexShardSettings.model_validate(dict(raw_settings))
        except PydanticValidationError as e:
            raise MetadataError(
                f"Failed to load metadata for index '{index_name}': invalid settings: {e}"
            ) from e

        try:
            raw_routing = await self._provider.get_routing_num_shards(index_name)
        except MetadataError:
            raise
        except Exception as e:
            raise MetadataError(
                f"Failed to load metadata for index '{index_name}': {e}"
            ) from e

        try:
            cluster = ClusterIndexMetadata.model_validate({"routing_num_shards": raw_routing})
        except PydanticValidationError as e:
            raise MetadataError(
                f"Failed to load metadata for index '{index_name}': invalid routing_num_shards: {e}"
            ) from e
        routing_num_shards = cluster.routing_num_shards or settings.number_of_shards

        try:
            topology = Topology.from_counts(
                index_name=index_name,
                shard_count=settings.number_of_shards,
                routing_shard_count=routing_num_shards,
                partition_size=settings.routing_partition_size,
            )
        except ConfigurationError as e:
            raise MetadataError(
                f"Failed to load metadata for index '{index_name}': {e.message}"
            ) from e

        logger.info(
            "topology_resolved",
            extra={
                "index_name": index_name,
                "shard_count": topology.shard_count,
                "routing_factor": topology.routing_factor,
            },
        )
        return topology
