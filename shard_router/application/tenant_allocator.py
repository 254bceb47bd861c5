"""Tenant -> shard assignment. Strategy picks the shard; the allocator owns the bookkeeping."""

import logging
import threading
from typing import Optional, Protocol

from shard_router.core.context import tenant_id_ctx
from shard_router.domain.exceptions import ConfigurationError, StrategyError
from shard_router.domain.validators.routing_validator import validate_tenant_id
from shard_router.observability.metrics import MetricsCollector

logger = logging.getLogger(__name__)


class AllocationStrategy(Protocol):
    """
    Chooses a shard for a tenant seen for the first time. Receives snapshot copies
    of the current maps, so a plain function of its arguments is a valid strategy.
    """

    def __call__(
        self,
        tenant_id: str,
        tenant_to_shard: dict[str, int],
        shard_to_tenants: dict[int, list[str]],
        shard_count: int,
    ) -> int: ...


class RoundRobinStrategy:
    """
    Default strategy. Keeps its own cursor starting at 0 and ignores the maps,
    so tenants seeded by other means do not move the cursor.
    """

    def __init__(self) -> None:
        self._next_shard = 0

    def __call__(
        self,
        tenant_id: str,
        tenant_to_shard: dict[str, int],
        shard_to_tenants: dict[int, list[str]],
        shard_count: int,
    ) -> int:
        assigned = self._next_shard
        self._next_shard = (self._next_shard + 1) % shard_count
        return assigned


class LeastLoadedStrategy:
    """Assign to the shard holding the fewest tenants; lowest shard number wins ties."""

    def __call__(
        self,
        tenant_id: str,
        tenant_to_shard: dict[str, int],
        shard_to_tenants: dict[int, list[str]],
        shard_count: int,
    ) -> int:
        return min(range(shard_count), key=lambda s: (len(shard_to_tenants.get(s, [])), s))


class TenantAllocator:
    """
    Idempotent, append-only tenant <-> shard bookkeeping. A tenant is assigned once
    and never moves. Thread-safe: the lookup-choose-record sequence runs under a lock.
    """

    def __init__(
        self,
        shard_count: int,
        strategy: Optional[AllocationStrategy] = None,
        metrics: Optional[MetricsCollector] = None,
    ) -> None:
        if shard_count < 1:
            raise ConfigurationError("shard_count must be >= 1")
        self._shard_count = shard_count
        self._strategy = strategy if strategy is not None else RoundRobinStrategy()
        self._tenant_to_shard: dict[str, int] = {}
        self._shard_to_tenants: dict[int, list[str]] = {}
        self._lock = threading.Lock()
        self._metrics = metrics

    @property
    def shard_count(self) -> int:
        return self._shard_count

    def assign(self, tenant_id: str) -> int:
        """Return the tenant's shard, asking the strategy only on first sight."""
        validate_tenant_id(tenant_id)
        token = tenant_id_ctx.set(tenant_id)
        try:
            with self._lock:
                existing = self._tenant_to_shard.get(tenant_id)
                if existing is not None:
                    return existing

                shard = self._strategy(
                    tenant_id,
                    dict(self._tenant_to_shard),
                    self._copy_shard_to_tenants(),
                    self._shard_count,
                )
                if isinstance(shard, bool) or not isinstance(shard, int) or not 0 <= shard < self._shard_count:
                    raise StrategyError(
                        f"Distribution strategy returned invalid shard number: {shard!r}"
                    )

                self._tenant_to_shard[tenant_id] = shard
                self._shard_to_tenants.setdefault(shard, []).append(tenant_id)

            if self._metrics is not None:
                self._metrics.increment("tenants_assigned", shard=shard)

            logger.info("tenant_assigned", extra={"shard": shard})
            return shard
        finally:
            tenant_id_ctx.reset(token)

    def shard_for(self, tenant_id: str) -> Optional[int]:
        """Assigned shard, or None if the tenant has not been seen."""
        with self._lock:
            return self._tenant_to_shard.get(tenant_id)

    def tenant_to_shard(self) -> dict[str, int]:
        with self._lock:
            return dict(self._tenant_to_shard)

    def shard_to_tenants(self) -> dict[int, list[str]]:
        with self._lock:
            return self._copy_shard_to_tenants()

    def _copy_shard_to_tenants(self) -> dict[int, list[str]]:
        return {shard: list(tenants) for shard, tenants in self._shard_to_tenants.items()}
