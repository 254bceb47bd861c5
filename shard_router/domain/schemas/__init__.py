"""Domain schemas. Parsing of store metadata payloads."""

from shard_router.domain.schemas.index_settings import ClusterIndexMetadata, IndexShardSettings

__all__ = [
    "ClusterIndexMetadata",
    "IndexShardSettings",
]
