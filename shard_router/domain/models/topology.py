"""Index topology. Pure value object — no store access."""

from dataclasses import dataclass
from typing import Optional

from shard_router.domain.exceptions import ConfigurationError


def compute_routing_factor(shard_count: int, routing_shard_count: int) -> int:
    """
    Ratio between the internal routing hash space and the visible shard count.
    One count must be an exact multiple of the other; anything else is a broken index.
    Raises ConfigurationError otherwise.
    """
    if shard_count < 1:
        raise ConfigurationError("shard_count must be >= 1")
    if routing_shard_count < 1:
        raise ConfigurationError("routing_shard_count must be >= 1")
    if shard_count == routing_shard_count:
        return 1
    if routing_shard_count > shard_count:
        if routing_shard_count % shard_count != 0:
            raise ConfigurationError(
                f"routing_shard_count ({routing_shard_count}) must be a multiple of shard_count ({shard_count})"
            )
        return routing_shard_count // shard_count
    if shard_count % routing_shard_count != 0:
        raise ConfigurationError(
            f"shard_count ({shard_count}) must be a multiple of routing_shard_count ({routing_shard_count})"
        )
    return shard_count // routing_shard_count


@dataclass(frozen=True)
class Topology:
    """Resolved shard layout of one index. Immutable; build via from_counts()."""

    index_name: str
    shard_count: int
    routing_shard_count: int
    routing_factor: int
    partition_size: Optional[int] = None

    def __post_init__(self) -> None:
        expected = compute_routing_factor(self.shard_count, self.routing_shard_count)
        if self.routing_factor != expected:
            raise ConfigurationError(
                f"routing_factor {self.routing_factor} does not match shard counts "
                f"({self.shard_count}/{self.routing_shard_count}); expected {expected}"
            )
        if self.partition_size is not None and self.partition_size < 1:
            raise ConfigurationError("partition_size must be >= 1 when set")

    @property
    def is_partitioned(self) -> bool:
        return self.partition_size is not None

    @classmethod
    def from_counts(
        cls,
        index_name: str,
        shard_count: int,
        routing_shard_count: Optional[int] = None,
        partition_size: Optional[int] = None,
    ) -> "Topology":
        """Derive the routing factor; routing_shard_count defaults to shard_count."""
        if routing_shard_count is None:
            routing_shard_count = shard_count
        return cls(
            index_name=index_name,
            shard_count=shard_count,
            routing_shard_count=routing_shard_count,
            routing_factor=compute_routing_factor(shard_count, routing_shard_count),
            partition_size=partition_size,
        )
