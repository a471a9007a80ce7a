"""
Core cryptographic utilities.

Provides the SHA-256 hasher used for Merkle leaves and internal nodes.
"""
from .hashing import (
    HASH_ALGORITHM,
    DIGEST_SIZE,
    sha256,
    hash_bytes,
    hash_concat,
    to_hex,
    from_hex,
    is_digest,
)

__all__ = [
    "HASH_ALGORITHM",
    "DIGEST_SIZE",
    "sha256",
    "hash_bytes",
    "hash_concat",
    "to_hex",
    "from_hex",
    "is_digest",
]
