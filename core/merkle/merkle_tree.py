"""
Merkle Tree Implementation
Deterministic bottom-up Merkle tree construction.

This module provides:
- Tree construction from raw data blocks
- Tree construction from pre-computed leaf digests
- Root-only helpers and tree inspection (levels, depth, summary)

Canonical Commitment Rules (Hard Contracts):
1. Leaf hashing: leaf = sha256(block), no prefix
2. Parent hashing: parent = sha256(left + right)
3. Padding rule: an unpaired last node at any level is paired with itself
4. Empty input: rejected with EmptyInputException before any hashing
5. Single leaf: root = leaf (no combination step)

Determinism Notes:
- No randomness or non-deterministic ordering
- This module never sorts leaves - it trusts input order
- Raw blocks and pre-computed digests use separate entry points so a
  leaf is never hashed twice
"""
from __future__ import annotations

import logging
from typing import Iterator, Sequence

from core.crypto.hashing import HASH_ALGORITHM, hash_concat, is_digest, to_hex
from core.merkle.node import MerkleNode
from core.schemas.errors import (
    EmptyInputException,
    InvalidDigestException,
    InvalidNodeException,
)
from core.schemas.tree import InputMode, TreeSummary


logger = logging.getLogger(__name__)


def merkle_parent(left: bytes, right: bytes) -> bytes:
    """
    Compute the parent digest of two child digests.

    Parent digest is deterministic: sha256(left + right)
    """
    return hash_concat(left, right)


def _validate_blocks(blocks: Sequence[bytes]) -> list[bytes]:
    if len(blocks) == 0:
        raise EmptyInputException()

    validated: list[bytes] = []
    for index, block in enumerate(blocks):
        if not isinstance(block, (bytes, bytearray, memoryview)):
            raise InvalidNodeException(
                f"Block {index} must be bytes, got {type(block).__name__}",
                details={"index": index, "type": type(block).__name__},
            )
        validated.append(bytes(block))
    return validated


def _validate_digests(digests: Sequence[bytes]) -> list[bytes]:
    if len(digests) == 0:
        raise EmptyInputException()

    for index, digest in enumerate(digests):
        if not is_digest(digest):
            raise InvalidDigestException(
                f"Digest {index} is not a {HASH_ALGORITHM} digest",
                index=index,
            )
    return [bytes(d) for d in digests]


def _reduce_level(level: list[MerkleNode]) -> list[MerkleNode]:
    """Combine one level into the next, pairing an odd last node with itself."""
    next_level: list[MerkleNode] = []
    for i in range(0, len(level), 2):
        left = level[i]
        right = level[i + 1] if i + 1 < len(level) else left
        next_level.append(MerkleNode.internal(left, right))
    return next_level


def _reduce(leaves: list[MerkleNode]) -> MerkleNode:
    """
    Reduce a leaf level to its root.

    Algorithm:
    1. While more than one node remains:
       - Pair adjacent nodes and build parents, in order
       - If the level is odd, the last node is paired with itself
    2. The single remaining node is the root

    Example: [a, b, c] -> [parent(a,b), parent(c,c)] -> [root]
    """
    level = leaves
    height = 0
    while len(level) > 1:
        logger.debug(f"Reducing level {height}: {len(level)} nodes")
        level = _reduce_level(level)
        height += 1

    root = level[0]
    logger.debug(f"Built tree over {len(leaves)} leaves, root {root.hex}")
    return root


def build_merkle_tree(blocks: Sequence[bytes]) -> MerkleNode:
    """
    Build a Merkle tree from raw data blocks.

    Every block is hashed once into a leaf; leaves are then combined
    level by level until a single root remains.

    Args:
        blocks: Ordered, non-empty sequence of data blocks.
                Order matters and is preserved.

    Returns:
        The root MerkleNode

    Raises:
        EmptyInputException: If blocks is empty
        InvalidNodeException: If a block is not bytes

    Example:
        >>> root = build_merkle_tree([b"block1", b"block2"])
        >>> len(root.digest)
        32
    """
    validated = _validate_blocks(blocks)
    return _reduce([MerkleNode.leaf(block) for block in validated])


def build_merkle_tree_from_digests(digests: Sequence[bytes]) -> MerkleNode:
    """
    Build a Merkle tree from pre-computed leaf digests.

    The digests become leaves as-is; they are not hashed again.
    build_merkle_tree_from_digests([sha256(b) for b in blocks]) has the
    same root as build_merkle_tree(blocks).

    Raises:
        EmptyInputException: If digests is empty
        InvalidDigestException: If a digest is malformed
    """
    validated = _validate_digests(digests)
    return _reduce([MerkleNode.from_digest(digest) for digest in validated])


def build_merkle_root(blocks: Sequence[bytes]) -> bytes:
    """Root digest of a tree built from raw blocks."""
    return build_merkle_tree(blocks).digest


def build_merkle_root_from_digests(digests: Sequence[bytes]) -> bytes:
    """Root digest of a tree built from pre-computed leaf digests."""
    return build_merkle_tree_from_digests(digests).digest


def compute_tree_depth(num_leaves: int) -> int:
    """
    Compute the depth of a Merkle tree with given number of leaves.

    Depth is the number of levels from leaves to root (inclusive).
    A single leaf has depth 1, two leaves have depth 2, etc.

    Returns:
        Tree depth (0 for no leaves)
    """
    if num_leaves < 0:
        raise ValueError(f"Number of leaves must be non-negative, got {num_leaves}")
    if num_leaves == 0:
        return 0

    depth = 1
    n = num_leaves
    while n > 1:
        n = (n + 1) // 2
        depth += 1

    return depth


def iter_levels(root: MerkleNode) -> Iterator[tuple[MerkleNode, ...]]:
    """
    Yield the levels of a tree top-down, starting with (root,).

    A node paired with itself appears twice in its level, matching the
    padded level it was combined from.
    """
    level: tuple[MerkleNode, ...] = (root,)
    while level:
        yield level
        level = tuple(
            child
            for node in level
            if not node.is_leaf
            for child in (node.left, node.right)
        )


def summarize_tree(
    root: MerkleNode,
    leaf_count: int,
    input_mode: InputMode = "raw",
    include_levels: bool = False,
    hex_prefix: bool = False,
) -> TreeSummary:
    """Build a TreeSummary for display or JSON output."""
    levels = None
    if include_levels:
        levels = [
            [to_hex(node.digest, prefix=hex_prefix) for node in level]
            for level in iter_levels(root)
        ]

    return TreeSummary(
        root=to_hex(root.digest, prefix=hex_prefix),
        leaf_count=leaf_count,
        depth=compute_tree_depth(leaf_count),
        input_mode=input_mode,
        hash_algorithm=HASH_ALGORITHM,
        levels=levels,
    )


__all__ = [
    "merkle_parent",
    "build_merkle_tree",
    "build_merkle_tree_from_digests",
    "build_merkle_root",
    "build_merkle_root_from_digests",
    "compute_tree_depth",
    "iter_levels",
    "summarize_tree",
]
