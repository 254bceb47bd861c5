# Application layer: resolution, synthesis, classification, tenant allocation, router facade.

from shard_router.application.key_synthesizer import RoutingKeySynthesizer, candidate_key
from shard_router.application.metadata_resolver import (
    MetadataProvider,
    MetadataResolver,
    StaticMetadataProvider,
)
from shard_router.application.router import ShardRouter
from shard_router.application.shard_classifier import ShardClassifier, calculate_shard, shard_for_hash
from shard_router.application.tenant_allocator import (
    AllocationStrategy,
    LeastLoadedStrategy,
    RoundRobinStrategy,
    TenantAllocator,
)

__all__ = [
    "AllocationStrategy",
    "LeastLoadedStrategy",
    "MetadataProvider",
    "MetadataResolver",
    "RoundRobinStrategy",
    "RoutingKeySynthesizer",
    "ShardClassifier",
    "ShardRouter",
    "StaticMetadataProvider",
    "TenantAllocator",
    "calculate_shard",
    "candidate_key",
    "shard_for_hash",
]
