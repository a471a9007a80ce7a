"""
Merkle Tree Nodes
Immutable node values for a binary Merkle tree.

A node is either:
- a leaf: no children, digest taken from external data
  (sha256(data), or a pre-computed digest)
- an internal node: two children, digest = sha256(left.digest + right.digest)

A node with exactly one child cannot be constructed. Nodes are frozen
once built; a parent holds plain references to its children. When an odd
node is paired with itself, both child slots reference the same node.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.crypto.hashing import DIGEST_SIZE, hash_concat, is_digest, sha256, to_hex
from core.schemas.errors import InvalidDigestException, InvalidNodeException


_BYTES_TYPES = (bytes, bytearray, memoryview)


@dataclass(frozen=True)
class MerkleNode:
    """
    A node in a binary Merkle tree.

    Attributes:
        digest: 32-byte SHA-256 digest of this node (derived from the
                children when omitted on an internal node)
        left: Left child (None for leaves)
        right: Right child (None for leaves)

    Prefer the constructors leaf(), from_digest(), internal() and create()
    over building instances directly.
    """
    digest: Optional[bytes] = None
    left: Optional[MerkleNode] = None
    right: Optional[MerkleNode] = None

    def __post_init__(self) -> None:
        """Validate node shape and digest; derive an omitted internal digest."""
        if (self.left is None) != (self.right is None):
            missing = "right" if self.right is None else "left"
            raise InvalidNodeException(
                "Nodes must either have two children or be leaves with data; "
                f"{missing} child is missing",
                details={"missing": missing},
            )

        if self.digest is None and self.left is not None:
            object.__setattr__(self, "digest", hash_concat(self.left.digest, self.right.digest))
            return

        if not is_digest(self.digest):
            raise InvalidDigestException(
                f"Node digest must be {DIGEST_SIZE} bytes, "
                f"got {type(self.digest).__name__}"
                + (f" of length {len(self.digest)}" if isinstance(self.digest, _BYTES_TYPES) else ""),
            )
        object.__setattr__(self, "digest", bytes(self.digest))

        # An explicit internal digest must agree with the children
        if self.left is not None:
            expected = hash_concat(self.left.digest, self.right.digest)
            if self.digest != expected:
                raise InvalidNodeException(
                    "Internal node digest does not match its children",
                    details={
                        "digest": self.digest.hex(),
                        "expected": expected.hex(),
                    },
                )

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def leaf(cls, data: bytes) -> MerkleNode:
        """
        Build a leaf by hashing a raw data block.

        The block is hashed as-is, with no leaf prefix.

        Raises:
            InvalidNodeException: If data is None or not a bytes-like value
        """
        if data is None:
            raise InvalidNodeException(
                "Leaf nodes must contain data",
                details={"reason": "no_data"},
            )
        if not isinstance(data, _BYTES_TYPES):
            raise InvalidNodeException(
                f"Leaf data must be bytes, got {type(data).__name__}",
                details={"reason": "invalid_data_type", "type": type(data).__name__},
            )
        return cls(digest=sha256(bytes(data)))

    @classmethod
    def from_digest(cls, digest: bytes) -> MerkleNode:
        """Build a leaf from an already-computed digest (no hashing)."""
        return cls(digest=digest)

    @classmethod
    def internal(cls, left: MerkleNode, right: MerkleNode) -> MerkleNode:
        """
        Build an internal node over two children.

        digest = sha256(left.digest + right.digest)

        Raises:
            InvalidNodeException: If either child is missing
        """
        if left is None or right is None:
            missing = [
                side for side, child in (("left", left), ("right", right))
                if child is None
            ]
            raise InvalidNodeException(
                "Internal nodes require both children; "
                f"missing: {', '.join(missing)}",
                details={"missing": missing},
            )
        return cls(left=left, right=right)

    @classmethod
    def create(
        cls,
        left: Optional[MerkleNode] = None,
        right: Optional[MerkleNode] = None,
        data: Optional[bytes] = None,
    ) -> MerkleNode:
        """
        Shape-checking constructor.

        - two children, no data -> internal node
        - no children, data -> leaf
        - anything else -> InvalidNodeException
        """
        if left is not None and right is not None:
            if data is not None:
                raise InvalidNodeException(
                    "Internal nodes cannot carry data",
                    details={"reason": "data_with_children"},
                )
            return cls.internal(left, right)

        if left is None and right is None:
            return cls.leaf(data)

        raise InvalidNodeException(
            "Nodes should either have two children or be leaf nodes with data",
            details={"missing": "right" if right is None else "left"},
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def is_leaf(self) -> bool:
        return self.left is None

    @property
    def hex(self) -> str:
        """Digest as lowercase hex."""
        return to_hex(self.digest)

    @property
    def height(self) -> int:
        """Number of edges to the deepest leaf (0 for a leaf)."""
        if self.is_leaf:
            return 0
        return max(self.left.height, self.right.height) + 1

    def __str__(self) -> str:
        return self.hex

    def __repr__(self) -> str:
        kind = "leaf" if self.is_leaf else "internal"
        return f"MerkleNode({kind}, digest={self.hex})"


__all__ = [
    "MerkleNode",
]
