"""
Hashing Utilities
SHA-256 primitives consumed by the Merkle tree builder.

This module provides:
- SHA-256 hashing for raw bytes
- Concatenation hashing for internal nodes
- Hex encoding/decoding with optional 0x prefix

Security/Determinism Notes:
- Always hash raw bytes exactly as given
- Leaves and internal nodes share the same hash function with no
  distinguishing prefix
- All operations are deterministic
"""
from __future__ import annotations

import hashlib


HASH_ALGORITHM = "sha256"

# Size of every digest produced by this module
DIGEST_SIZE: int = hashlib.sha256().digest_size


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA-256 digest

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def hash_bytes(data: bytes) -> bytes:
    """Alias for sha256()."""
    return sha256(data)


def hash_concat(left: bytes, right: bytes) -> bytes:
    """
    Hash the concatenation of two byte sequences.

    Used for Merkle parent hashes: parent = sha256(left + right)

    Args:
        left: Left child digest
        right: Right child digest

    Returns:
        32-byte SHA-256 digest of concatenation
    """
    return sha256(bytes(left) + bytes(right))


def to_hex(data: bytes, prefix: bool = False) -> str:
    """
    Convert bytes to a lowercase hexadecimal string.

    Args:
        data: Raw bytes
        prefix: Prepend "0x" when True

    Returns:
        Hex string

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"), prefix=True)
        '0xdeadbeef'
    """
    encoded = data.hex()
    return "0x" + encoded if prefix else encoded


def from_hex(hex_string: str) -> bytes:
    """
    Convert a hexadecimal string (0x prefix optional) to bytes.

    Raises:
        ValueError: If the string has odd length or contains invalid
                    hex characters
    """
    hex_content = hex_string.strip()
    if hex_content[:2].lower() == "0x":
        hex_content = hex_content[2:]

    if len(hex_content) % 2 != 0:
        raise ValueError(
            f"Hex string must have even length, got length {len(hex_content)}"
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in string: {e}") from e


def is_digest(value: object) -> bool:
    """Check whether value is a well-formed digest (bytes of DIGEST_SIZE)."""
    return isinstance(value, (bytes, bytearray, memoryview)) and len(value) == DIGEST_SIZE


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
