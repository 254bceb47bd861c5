"""Fixtures for routing application tests."""

import pytest

from shard_router.application.metadata_resolver import StaticMetadataProvider
from shard_router.domain.models.topology import Topology

INDEX = "test-index"


def make_provider(
    number_of_shards="2",
    routing_num_shards=None,
    routing_partition_size=None,
    index_name: str = INDEX,
) -> StaticMetadataProvider:
    settings = {"number_of_shards": number_of_shards}
    if routing_partition_size is not None:
        settings["routing_partition_size"] = routing_partition_size
    routing = {} if routing_num_shards is None else {index_name: routing_num_shards}
    return StaticMetadataProvider({index_name: settings}, routing)


@pytest.fixture
def provider():
    return make_provider(number_of_shards="2", routing_num_shards=2)


@pytest.fixture
def topology_2():
    return Topology.from_counts(INDEX, 2)


@pytest.fixture
def topology_3():
    return Topology.from_counts(INDEX, 3)


@pytest.fixture
def provider_factory():
    return make_provider
