"""MurmurHash3 (x86, 32-bit) as used by the store to route documents to shards.

The store hashes routing values over their UTF-16 code units, not over UTF-8,
so ``routing_hash`` expands each code unit into two little-endian bytes before
hashing. Results must be bit-exact: a single wrong bit sends data to the wrong
shard.
"""

MASK_32 = 0xFFFFFFFF

C1 = 0xCC9E2D51
C2 = 0x1B873593
R1 = 15
R2 = 13
M = 5
N = 0xE6546B64

FMIX_C1 = 0x85EBCA6B
FMIX_C2 = 0xC2B2AE35


def _rotl32(x: int, r: int) -> int:
    return ((x << r) | (x >> (32 - r))) & MASK_32


def _scramble(k: int) -> int:
    k = (k * C1) & MASK_32
    k = _rotl32(k, R1)
    return (k * C2) & MASK_32


def _fmix32(h: int) -> int:
    h ^= h >> 16
    h = (h * FMIX_C1) & MASK_32
    h ^= h >> 13
    h = (h * FMIX_C2) & MASK_32
    h ^= h >> 16
    return h


def murmur3_x86_32(data: bytes, seed: int = 0) -> int:
    """Return the unsigned 32-bit MurmurHash3 x86_32 of ``data``."""
    length = len(data)
    h = seed & MASK_32
    body_end = length - (length % 4)

    for i in range(0, body_end, 4):
        k = int.from_bytes(data[i:i + 4], "little")
        h ^= _scramble(k)
        h = _rotl32(h, R2)
        h = (h * M + N) & MASK_32

    tail = data[body_end:]
    if tail:
        # 1-3 bytes, folded in without the mix-back rotation
        k = int.from_bytes(tail, "little")
        h ^= _scramble(k)

    h ^= length
    return _fmix32(h)


def to_signed_32(value: int) -> int:
    """Reinterpret an unsigned 32-bit value as two's-complement signed."""
    value &= MASK_32
    return value - 0x100000000 if value >= 0x80000000 else value


def utf16_le_bytes(text: str) -> bytes:
    """Two bytes per UTF-16 code unit, low byte first. Lone surrogates are kept as-is."""
    return text.encode("utf-16-le", errors="surrogatepass")


def routing_hash(text: str) -> int:
    """Signed 32-bit routing hash of ``text``, seed fixed at 0."""
    return to_signed_32(murmur3_x86_32(utf16_le_bytes(text), 0))
