"""
Test fixtures package.

Provides known hash vectors and block factories.

Usage:
    from fixtures import make_blocks, FOUR_BLOCK_ROOT_HEX
"""

from .vectors import (
    EXAMPLE_BLOCKS,
    BLOCK_DIGESTS_HEX,
    NODE_12_HEX,
    NODE_34_HEX,
    NODE_33_HEX,
    FOUR_BLOCK_ROOT_HEX,
    THREE_BLOCK_ROOT_HEX,
    EMPTY_SHA256_HEX,
    make_blocks,
    make_random_blocks,
    flip_bit,
)

__all__ = [
    "EXAMPLE_BLOCKS",
    "BLOCK_DIGESTS_HEX",
    "NODE_12_HEX",
    "NODE_34_HEX",
    "NODE_33_HEX",
    "FOUR_BLOCK_ROOT_HEX",
    "THREE_BLOCK_ROOT_HEX",
    "EMPTY_SHA256_HEX",
    "make_blocks",
    "make_random_blocks",
    "flip_bit",
]
