"""Validators for routing inputs. Pure functions, no store access."""

from typing import Any

from shard_router.domain.exceptions import ConfigurationError, ValidationError


def validate_index_name(index_name: Any) -> None:
    """Index name must be a non-blank string. Raises ConfigurationError if invalid."""
    if not isinstance(index_name, str) or not index_name.strip():
        raise ConfigurationError("index_name must be a non-empty string")


def validate_routing_key(routing_key: Any) -> None:
    """Routing key must be a non-empty string. Raises ValidationError if invalid."""
    if not isinstance(routing_key, str) or len(routing_key) == 0:
        raise ValidationError("routing_key must be a non-empty string")


def validate_shard_number(shard: Any, shard_count: int, name: str = "shard") -> None:
    """Shard must be an int in [0, shard_count). bool is rejected. Raises ValidationError."""
    if isinstance(shard, bool) or not isinstance(shard, int):
        raise ValidationError(f"{name} must be an integer, got {type(shard).__name__}")
    if not 0 <= shard < shard_count:
        raise ValidationError(
            f"{name} must be a valid shard number (0-{shard_count - 1}), got {shard}"
        )


def validate_tenant_id(tenant_id: Any) -> None:
    """Tenant id must be a non-empty string. Raises ValidationError if invalid."""
    if not isinstance(tenant_id, str) or not tenant_id:
        raise ValidationError("tenant_id must be a non-empty string")
