"""
Merkle Tree
Deterministic binary Merkle tree construction.

This module provides:
- MerkleNode: Immutable leaf / internal node
- build_merkle_tree: Build a tree from raw data blocks
- build_merkle_tree_from_digests: Build a tree from pre-computed digests
- build_merkle_root: Compute the root digest of raw data blocks

Canonical Commitment Rules:
1. Leaf hashing: sha256(block)
2. Parent hashing: sha256(left + right)
3. Padding: Pair the last node with itself if odd number at any level
4. Empty input: rejected (EmptyInputException)
5. Single leaf: root = leaf

Usage:
    from core.merkle import build_merkle_tree

    root = build_merkle_tree([b"block1", b"block2", b"block3", b"block4"])
    print(root.hex)
"""
from .node import MerkleNode

from .merkle_tree import (
    merkle_parent,
    build_merkle_tree,
    build_merkle_tree_from_digests,
    build_merkle_root,
    build_merkle_root_from_digests,
    compute_tree_depth,
    iter_levels,
    summarize_tree,
)


__all__ = [
    # Core types
    "MerkleNode",
    # Core functions
    "merkle_parent",
    "build_merkle_tree",
    "build_merkle_tree_from_digests",
    "build_merkle_root",
    "build_merkle_root_from_digests",
    # Inspection
    "compute_tree_depth",
    "iter_levels",
    "summarize_tree",
]
