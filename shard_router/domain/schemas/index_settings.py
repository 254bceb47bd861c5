"""Pydantic schemas for metadata returned by the store. Lenient on type, strict on range."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class IndexShardSettings(BaseModel):
    """
    The `index` block of an index's settings. The store reports numbers as decimal
    strings ("3"); plain ints are accepted too.
    """

    model_config = ConfigDict(extra="ignore")

    number_of_shards: int = Field(1, ge=1, description="Declared (visible) shard count")
    routing_partition_size: Optional[int] = Field(
        None, ge=1, description="Present only for partitioned indices"
    )


class ClusterIndexMetadata(BaseModel):
    """Per-index entry of the cluster state metadata."""

    model_config = ConfigDict(extra="ignore")

    routing_num_shards: Optional[int] = Field(
        None, ge=1, description="Internal routing hash space; absent means equal to number_of_shards"
    )
