"""Routing key synthesis: bounded search for a key that hashes into a target shard."""

import hashlib
import logging
from typing import Optional

from shard_router.application.shard_classifier import shard_for_hash
from shard_router.domain.exceptions import ConfigurationError
from shard_router.domain.models.topology import Topology
from shard_router.domain.validators.routing_validator import validate_shard_number
from shard_router.hashing.murmur3 import routing_hash
from shard_router.observability.metrics import MetricsCollector

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 10_000


def candidate_key(attempt: int, prefix: str = "", suffix: str = "") -> str:
    """Deterministic candidate for an attempt: 8-digit counter + 8 hex chars of md5(counter)."""
    fingerprint = hashlib.md5(str(attempt).encode("utf-8")).hexdigest()[:8]
    return f"{prefix}{attempt:08d}_{fingerprint}{suffix}"


class RoutingKeySynthesizer:
    """
    Finds, per shard, a routing key whose hash lands on that shard.
    Exhausting the attempt budget is not an error: the shard simply gets no key.
    """

    def __init__(
        self,
        prefix: str = "",
        suffix: str = "",
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        metrics: Optional[MetricsCollector] = None,
    ) -> None:
        if max_attempts < 1:
            raise ConfigurationError("max_attempts must be >= 1")
        self._prefix = prefix
        self._suffix = suffix
        self._max_attempts = max_attempts
        self._metrics = metrics

    def synthesize(self, target_shard: int, topology: Topology) -> Optional[str]:
        """Return the first candidate that maps to target_shard, or None."""
        validate_shard_number(target_shard, topology.shard_count, name="target_shard")
        if topology.is_partitioned:
            # partitioned indices route on (key, id) pairs; a key alone cannot pin a shard
            return None

        for attempt in range(self._max_attempts):
            candidate = candidate_key(attempt, self._prefix, self._suffix)
            if shard_for_hash(routing_hash(candidate), topology) == target_shard:
                if self._metrics is not None:
                    self._metrics.observe("synthesis_attempts", attempt + 1, shard=target_shard)
                return candidate
        return None

    def synthesize_all(self, topology: Topology) -> dict[int, str]:
        """One key per shard; shards with no key found are left out."""
        keys: dict[int, str] = {}
        if topology.is_partitioned:
            logger.warning(
                "routing_keys_unavailable_partitioned_index",
                extra={"index_name": topology.index_name, "shard_count": topology.shard_count},
            )
            return keys
        for shard in range(topology.shard_count):
            key = self.synthesize(shard, topology)
            if key is None:
                logger.warning(
                    "routing_key_synthesis_exhausted",
                    extra={"index_name": topology.index_name, "shard": shard},
                )
                if self._metrics is not None:
                    self._metrics.increment("routing_key_synthesis_exhausted", shard=shard)
                continue
            keys[shard] = key
            if self._metrics is not None:
                self._metrics.increment("routing_keys_synthesized")
        return keys
