"""Hashing layer: bit-exact MurmurHash3 used for shard routing."""

from shard_router.hashing.murmur3 import murmur3_x86_32, routing_hash, to_signed_32, utf16_le_bytes

__all__ = [
    "murmur3_x86_32",
    "routing_hash",
    "to_signed_32",
    "utf16_le_bytes",
]
