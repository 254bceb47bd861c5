"""Domain models. Pure value objects."""

from shard_router.domain.models.topology import Topology, compute_routing_factor

__all__ = [
    "Topology",
    "compute_routing_factor",
]
