"""Wiring: settings -> metadata provider -> ShardRouter."""

from typing import Optional

from shard_router.application.router import ShardRouter
from shard_router.application.tenant_allocator import AllocationStrategy
from shard_router.config.settings import RouterSettings, get_settings
from shard_router.infrastructure.elasticsearch.metadata_provider import ElasticsearchMetadataProvider
from shard_router.observability.metrics import MetricsCollector


def build_router(
    settings: Optional[RouterSettings] = None,
    strategy: Optional[AllocationStrategy] = None,
    metrics: Optional[MetricsCollector] = None,
) -> tuple[ShardRouter, ElasticsearchMetadataProvider]:
    """
    Build an uninitialized router backed by the store's REST API.
    Caller awaits router.initialize() and closes the provider when done.
    """
    settings = settings or get_settings()
    provider = ElasticsearchMetadataProvider.from_settings(settings)
    router = ShardRouter.from_settings(settings, provider, strategy=strategy, metrics=metrics)
    return router, provider
