"""Shard classification: which shard does a routing key land on right now."""

from shard_router.domain.models.topology import Topology
from shard_router.domain.validators.routing_validator import (
    validate_routing_key,
    validate_shard_number,
)
from shard_router.hashing.murmur3 import routing_hash


def shard_for_hash(hash_value: int, topology: Topology) -> int:
    """
    (hash mod routing_shard_count) // routing_factor, with floor modulo so a
    negative hash still lands in [0, routing_shard_count), as the store's floorMod does.
    Keys with a negative hash therefore classify differently than under a truncating
    remainder, which would yield a negative shard. Every shard computation in this
    package goes through here.
    """
    return (hash_value % topology.routing_shard_count) // topology.routing_factor


def calculate_shard(routing_key: str, topology: Topology) -> int:
    """Shard for an already-validated routing key."""
    return shard_for_hash(routing_hash(routing_key), topology)


class ShardClassifier:
    """Classify and verify routing keys against a topology. Stateless."""

    @staticmethod
    def classify(routing_key: str, topology: Topology) -> int:
        validate_routing_key(routing_key)
        return calculate_shard(routing_key, topology)

    @staticmethod
    def verify(routing_key: str, expected_shard: int, topology: Topology) -> bool:
        """True iff routing_key maps to expected_shard. Inputs are validated before hashing."""
        validate_routing_key(routing_key)
        validate_shard_number(expected_shard, topology.shard_count, name="expected_shard")
        return calculate_shard(routing_key, topology) == expected_shard
