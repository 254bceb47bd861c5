"""MetadataResolver: topology derivation, defaults and failure modes."""

from unittest.mock import AsyncMock

import pytest

from shard_router.application.metadata_resolver import MetadataResolver, StaticMetadataProvider
from shard_router.domain.exceptions import ConfigurationError, MetadataError

INDEX = "test-index"


@pytest.mark.asyncio
async def test_resolve_basic(provider):
    topology = await MetadataResolver(provider).resolve(INDEX)
    assert topology.index_name == INDEX
    assert topology.shard_count == 2
    assert topology.routing_shard_count == 2
    assert topology.routing_factor == 1
    assert topology.is_partitioned is False


@pytest.mark.asyncio
async def test_routing_num_shards_defaults_to_shard_count(provider_factory):
    topology = await MetadataResolver(provider_factory(number_of_shards="5")).resolve(INDEX)
    assert topology.routing_shard_count == 5
    assert topology.routing_factor == 1


@pytest.mark.asyncio
async def test_routing_factor_from_larger_routing_space(provider_factory):
    p = provider_factory(number_of_shards="3", routing_num_shards=768)
    topology = await MetadataResolver(p).resolve(INDEX)
    assert topology.routing_factor == 256


@pytest.mark.asyncio
async def test_integer_shard_count_accepted(provider_factory):
    topology = await MetadataResolver(provider_factory(number_of_shards=4)).resolve(INDEX)
    assert topology.shard_count == 4


@pytest.mark.asyncio
async def test_partition_size_parsed(provider_factory):
    p = provider_factory(number_of_shards="4", routing_partition_size="2")
    topology = await MetadataResolver(p).resolve(INDEX)
    assert topology.is_partitioned is True
    assert topology.partition_size == 2


@pytest.mark.asyncio
async def test_invalid_ratio_raises_metadata_error(provider_factory):
    p = provider_factory(number_of_shards="3", routing_num_shards=4)
    with pytest.raises(MetadataError, match="multiple") as exc_info:
        await MetadataResolver(p).resolve(INDEX)
    assert isinstance(exc_info.value.__cause__, ConfigurationError)


@pytest.mark.asyncio
async def test_missing_settings_raises():
    with pytest.raises(MetadataError, match="could not find settings"):
        await MetadataResolver(StaticMetadataProvider()).resolve(INDEX)


@pytest.mark.asyncio
async def test_unparsable_settings_raise(provider_factory):
    with pytest.raises(MetadataError, match="invalid settings"):
        await MetadataResolver(provider_factory(number_of_shards="many")).resolve(INDEX)


@pytest.mark.asyncio
async def test_provider_exception_wrapped():
    provider = AsyncMock()
    provider.get_index_settings = AsyncMock(side_effect=ConnectionError("refused"))
    with pytest.raises(MetadataError, match="test-index") as exc_info:
        await MetadataResolver(provider).resolve(INDEX)
    assert isinstance(exc_info.value.__cause__, ConnectionError)


@pytest.mark.asyncio
async def test_cluster_state_exception_wrapped():
    provider = AsyncMock()
    provider.get_index_settings = AsyncMock(return_value={"number_of_shards": "2"})
    provider.get_routing_num_shards = AsyncMock(side_effect=TimeoutError("slow"))
    with pytest.raises(MetadataError, match="slow"):
        await MetadataResolver(provider).resolve(INDEX)


@pytest.mark.asyncio
async def test_provider_called_once_per_source():
    provider = AsyncMock()
    provider.get_index_settings = AsyncMock(return_value={"number_of_shards": "2"})
    provider.get_routing_num_shards = AsyncMock(return_value=None)
    await MetadataResolver(provider).resolve(INDEX)
    provider.get_index_settings.assert_awaited_once_with(INDEX)
    provider.get_routing_num_shards.assert_awaited_once_with(INDEX)
