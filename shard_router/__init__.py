"""Routing key synthesis and tenant-to-shard allocation for hash-routed indices."""

from shard_router.application import (
    AllocationStrategy,
    LeastLoadedStrategy,
    MetadataProvider,
    RoundRobinStrategy,
    ShardRouter,
    StaticMetadataProvider,
)
from shard_router.domain.exceptions import (
    ConfigurationError,
    MetadataError,
    NotInitializedError,
    ShardRouterError,
    StrategyError,
    ValidationError,
)
from shard_router.domain.models import Topology
from shard_router.hashing import routing_hash

__all__ = [
    "AllocationStrategy",
    "ConfigurationError",
    "LeastLoadedStrategy",
    "MetadataError",
    "MetadataProvider",
    "NotInitializedError",
    "RoundRobinStrategy",
    "ShardRouter",
    "ShardRouterError",
    "StaticMetadataProvider",
    "StrategyError",
    "Topology",
    "ValidationError",
    "routing_hash",
]
