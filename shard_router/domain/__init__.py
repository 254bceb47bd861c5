"""Domain layer: topology, schemas, validators, exceptions. Pure logic only."""

from shard_router.domain.exceptions import (
    ConfigurationError,
    MetadataError,
    NotInitializedError,
    ShardRouterError,
    StrategyError,
    ValidationError,
)
from shard_router.domain.models import Topology, compute_routing_factor
from shard_router.domain.schemas import ClusterIndexMetadata, IndexShardSettings
from shard_router.domain.validators import (
    validate_index_name,
    validate_routing_key,
    validate_shard_number,
    validate_tenant_id,
)

__all__ = [
    "ClusterIndexMetadata",
    "ConfigurationError",
    "IndexShardSettings",
    "MetadataError",
    "NotInitializedError",
    "ShardRouterError",
    "StrategyError",
    "Topology",
    "ValidationError",
    "compute_routing_factor",
    "validate_index_name",
    "validate_routing_key",
    "validate_shard_number",
    "validate_tenant_id",
]
