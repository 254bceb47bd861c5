"""Router exceptions. Raised synchronously to the caller; nothing here is retried."""


class ShardRouterError(Exception):
    """Base for all shard-router errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(ShardRouterError):
    """Raised for missing or invalid construction arguments (e.g. empty index name, bad shard ratio)."""


class NotInitializedError(ShardRouterError):
    """Raised when a query method is called before initialize() has completed."""


class MetadataError(ShardRouterError):
    """Raised when index topology cannot be fetched or has an unusable shape."""


class ValidationError(ShardRouterError):
    """Raised for a malformed routing key, tenant id or out-of-range shard argument."""


class StrategyError(ShardRouterError):
    """Raised when an allocation strategy returns a shard outside [0, shard_count)."""
