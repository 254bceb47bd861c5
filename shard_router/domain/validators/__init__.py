"""Domain validators. Pure validation functions."""

from shard_router.domain.validators.routing_validator import (
    validate_index_name,
    validate_routing_key,
    validate_shard_number,
    validate_tenant_id,
)

__all__ = [
    "validate_index_name",
    "validate_routing_key",
    "validate_shard_number",
    "validate_tenant_id",
]
