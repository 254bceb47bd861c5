"""ShardRouter: routing keys per shard and per tenant for one index."""

import logging
from typing import Optional

from shard_router.application.key_synthesizer import DEFAULT_MAX_ATTEMPTS, RoutingKeySynthesizer
from shard_router.application.metadata_resolver import MetadataProvider, MetadataResolver
from shard_router.application.shard_classifier import ShardClassifier
from shard_router.application.tenant_allocator import AllocationStrategy, TenantAllocator
from shard_router.config.settings import RouterSettings
from shard_router.core.context import index_name_ctx
from shard_router.domain.exceptions import ConfigurationError, NotInitializedError
from shard_router.domain.models.topology import Topology
from shard_router.domain.validators.routing_validator import validate_index_name
from shard_router.observability.metrics import MetricsCollector


class ShardRouter:
    """
    Loads index topology once, precomputes one routing key per shard and hands
    those keys out per shard or per tenant.

    Lifecycle: construct, then `await initialize()` exactly once. Every query before
    that raises NotInitializedError. Topology and keys never change afterwards; to
    pick up a resharded index, build a new router. Shards for which no key was found
    (attempt budget exhausted, partitioned index) yield None rather than an error.
    """

    def __init__(
        self,
        metadata_provider: MetadataProvider,
        index_name: str,
        prefix: str = "",
        suffix: str = "",
        strategy: Optional[AllocationStrategy] = None,
        *,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        metrics: Optional[MetricsCollector] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if metadata_provider is None:
            raise ConfigurationError("metadata_provider is required")
        validate_index_name(index_name)
        self._resolver = MetadataResolver(metadata_provider)
        self._index_name = index_name
        self._strategy = strategy
        self._metrics = metrics
        self._logger = logger or logging.getLogger(__name__)
        self._synthesizer = RoutingKeySynthesizer(
            prefix=prefix,
            suffix=suffix,
            max_attempts=max_attempts,
            metrics=metrics,
        )
        self._topology: Optional[Topology] = None
        self._routing_keys: dict[int, str] = {}
        self._allocator: Optional[TenantAllocator] = None

    @classmethod
    def from_settings(
        cls,
        settings: RouterSettings,
        metadata_provider: MetadataProvider,
        strategy: Optional[AllocationStrategy] = None,
        metrics: Optional[MetricsCollector] = None,
    ) -> "ShardRouter":
        return cls(
            metadata_provider,
            settings.index_name,
            prefix=settings.key_prefix,
            suffix=settings.key_suffix,
            strategy=strategy,
            max_attempts=settings.max_synthesis_attempts,
            metrics=metrics,
        )

    @property
    def index_name(self) -> str:
        return self._index_name

    @property
    def is_initialized(self) -> bool:
        return self._topology is not None

    @property
    def topology(self) -> Topology:
        return self._require_topology()

    async def initialize(self) -> None:
        """Resolve topology (the only await), then synthesise every shard's key."""
        if self._topology is not None:
            raise ConfigurationError(
                f"ShardRouter for index '{self._index_name}' is already initialized; create a new router instead"
            )
        token = index_name_ctx.set(self._index_name)
        try:
            topology = await self._resolver.resolve(self._index_name)
            routing_keys = self._synthesizer.synthesize_all(topology)
            allocator = TenantAllocator(
                topology.shard_count,
                strategy=self._strategy,
                metrics=self._metrics,
            )
            # publish state only once everything above succeeded
            self._routing_keys = routing_keys
            self._allocator = allocator
            self._topology = topology
            self._logger.info(
                "shard_router_initialized",
                extra={
                    "index_name": self._index_name,
                    "shard_count": topology.shard_count,
                    "routing_factor": topology.routing_factor,
                },
            )
        finally:
            index_name_ctx.reset(token)

    def get_routing_key_for_shard(self, shard: int) -> Optional[str]:
        self._require_topology()
        return self._routing_keys.get(shard)

    def get_all_routing_keys(self) -> dict[int, str]:
        """Copy of shard -> routing key. Shards without a key are absent."""
        self._require_topology()
        return dict(self._routing_keys)

    def calculate_shard_for_routing_key(self, routing_key: str) -> int:
        return ShardClassifier.classify(routing_key, self._require_topology())

    def verify_routing_key(self, routing_key: str, expected_shard: int) -> bool:
        return ShardClassifier.verify(routing_key, expected_shard, self._require_topology())

    def get_routing_key_for_tenant(self, tenant_id: str) -> Optional[str]:
        """
        Routing key of the tenant's shard, assigning the tenant on first call.
        May return None even though the tenant is now assigned, if that shard has no key.
        """
        shard = self._require_allocator().assign(tenant_id)
        return self._routing_keys.get(shard)

    def get_shard_for_tenant(self, tenant_id: str) -> Optional[int]:
        """Assigned shard without assigning; None for unseen tenants."""
        return self._require_allocator().shard_for(tenant_id)

    def get_shard_tenant_mapping(self) -> dict[int, list[str]]:
        """Copy of shard -> tenant ids in assignment order."""
        return self._require_allocator().shard_to_tenants()

    def _require_topology(self) -> Topology:
        if self._topology is None:
            raise NotInitializedError("ShardRouter is not initialized. Call initialize() first.")
        return self._topology

    def _require_allocator(self) -> TenantAllocator:
        self._require_topology()
        return self._allocator  # type: ignore[return-value]
