"""Routing input validators: keys, shards, tenants, index names."""

import pytest

from shard_router.domain.exceptions import ConfigurationError, ValidationError
from shard_router.domain.validators import (
    validate_index_name,
    validate_routing_key,
    validate_shard_number,
    validate_tenant_id,
)


@pytest.mark.parametrize("name", ["", "   ", None, 5])
def test_index_name_invalid(name):
    with pytest.raises(ConfigurationError, match="index_name"):
        validate_index_name(name)


def test_index_name_valid():
    validate_index_name("tenants-v1")


@pytest.mark.parametrize("key", ["", None, 12])
def test_routing_key_invalid(key):
    with pytest.raises(ValidationError, match="routing_key"):
        validate_routing_key(key)


def test_routing_key_whitespace_is_a_valid_key():
    validate_routing_key(" ")


@pytest.mark.parametrize("shard", [-1, 3, 100])
def test_shard_out_of_range(shard):
    with pytest.raises(ValidationError, match="0-2"):
        validate_shard_number(shard, 3)


@pytest.mark.parametrize("shard", [True, 1.0, "1", None])
def test_shard_wrong_type(shard):
    with pytest.raises(ValidationError, match="integer"):
        validate_shard_number(shard, 3)


def test_shard_in_range():
    for shard in range(3):
        validate_shard_number(shard, 3)


@pytest.mark.parametrize("tenant", ["", None])
def test_tenant_id_invalid(tenant):
    with pytest.raises(ValidationError, match="tenant_id"):
        validate_tenant_id(tenant)
