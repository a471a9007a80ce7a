"""
CLI Root Command

Compute the Merkle root of a sequence of blocks:
- Files (one block per file, read as raw bytes)
- Literal text blocks (UTF-8 encoded)
- Pre-computed leaf digests (hex)

Usage:
    merkle root a.bin b.bin c.bin [--json] [--levels]
    merkle root --block block1 --block block2
    merkle root --digest <hex> --digest <hex> [--expect <hex>]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path
from typing import Any, Sequence

from core.config.runtime import RuntimeConfig
from core.crypto.hashing import from_hex, is_digest, to_hex
from core.merkle.merkle_tree import (
    build_merkle_tree,
    build_merkle_tree_from_digests,
    summarize_tree,
)
from core.merkle.node import MerkleNode
from core.schemas.errors import (
    BlockInputException,
    EmptyInputException,
    ErrorCodes,
    InvalidDigestException,
    MerkleError,
    MerkleException,
)
from core.schemas.tree import RootCheck, TreeSummary


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def load_blocks(files: Sequence[str], texts: Sequence[str]) -> list[bytes]:
    """
    Collect raw blocks: file contents first (in argument order),
    then literal text blocks.
    """
    blocks: list[bytes] = []
    for name in files:
        path = Path(name)
        try:
            blocks.append(path.read_bytes())
        except OSError as e:
            raise BlockInputException(
                f"Cannot read block file {path}: {e.strerror or e}",
                source=str(path),
            ) from e
        logger.debug(f"Read block {len(blocks) - 1} from {path} ({len(blocks[-1])} bytes)")

    blocks.extend(text.encode("utf-8") for text in texts)
    return blocks


def parse_digests(values: Sequence[str]) -> list[bytes]:
    """Decode hex leaf digests, rejecting anything that is not a digest."""
    digests: list[bytes] = []
    for index, value in enumerate(values):
        try:
            digest = from_hex(value)
        except ValueError as e:
            raise InvalidDigestException(str(e), index=index) from e
        if not is_digest(digest):
            raise InvalidDigestException(
                f"Digest {index} has {len(digest)} bytes, expected a sha256 digest",
                index=index,
            )
        digests.append(digest)
    return digests


def check_root(root: MerkleNode, expected_hex: str, hex_prefix: bool = False) -> RootCheck:
    """Compare a computed root against an expected hex digest."""
    try:
        expected = from_hex(expected_hex)
    except ValueError as e:
        raise InvalidDigestException(f"Expected root is not valid hex: {e}") from e
    if not is_digest(expected):
        raise InvalidDigestException(
            f"Expected root has {len(expected)} bytes, expected a sha256 digest",
        )

    return RootCheck(
        ok=expected == root.digest,
        expected=to_hex(expected, prefix=hex_prefix),
        actual=to_hex(root.digest, prefix=hex_prefix),
    )


def build_from_args(args: Namespace) -> tuple[MerkleNode, int, str]:
    """Build the tree described by the command-line arguments."""
    files = list(getattr(args, "files", None) or [])
    texts = list(getattr(args, "block", None) or [])
    digest_values = list(getattr(args, "digest", None) or [])

    if digest_values:
        if files or texts:
            raise BlockInputException(
                "Pre-computed digests cannot be combined with raw blocks",
            )
        digests = parse_digests(digest_values)
        return build_merkle_tree_from_digests(digests), len(digests), "digests"

    blocks = load_blocks(files, texts)
    if not blocks:
        raise EmptyInputException(
            "No input blocks given (pass files, --block or --digest)",
        )
    return build_merkle_tree(blocks), len(blocks), "raw"


def print_summary(summary: TreeSummary, check: RootCheck | None) -> None:
    """Print a human-readable summary."""
    print(f"Merkle Root Hash: {summary.root}")
    print(f"Leaves: {summary.leaf_count}  Depth: {summary.depth}  Input: {summary.input_mode}")

    if summary.levels:
        for height, level in enumerate(summary.levels):
            print(f"\nLevel {height} ({len(level)} nodes):")
            for digest in level:
                print(f"  {digest}")

    if check is not None:
        if check.ok:
            print("\n✓ Root matches expected value")
        else:
            print("\n✗ Root mismatch")
            print(f"  expected: {check.expected}")
            print(f"  actual:   {check.actual}")


def root_cmd(args: Namespace) -> int:
    """Handle root command."""
    config: RuntimeConfig = getattr(args, "cli_config", None) or RuntimeConfig()
    hex_prefix = config.display.hex_prefix

    try:
        root, leaf_count, input_mode = build_from_args(args)
        check = check_root(root, args.expect, hex_prefix) if args.expect else None
    except MerkleException as e:
        logger.debug(f"Tree construction failed: {e!r}")
        if args.json:
            output: dict[str, Any] = {"ok": False, "error": e.to_error_model().model_dump()}
            print(json.dumps(output, indent=2))
        else:
            print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    summary = summarize_tree(
        root,
        leaf_count=leaf_count,
        input_mode=input_mode,
        include_levels=args.levels,
        hex_prefix=hex_prefix,
    )
    logger.info(f"Merkle root over {leaf_count} leaves: {summary.root}")

    if args.json:
        output = {"ok": check.ok if check else True, "summary": summary.model_dump(exclude_none=True)}
        if check is not None:
            output["check"] = check.model_dump()
            if not check.ok:
                output["error"] = MerkleError(
                    code=ErrorCodes.ROOT_MISMATCH,
                    message="Computed root does not match the expected root",
                    details={"expected": check.expected, "actual": check.actual},
                ).model_dump()
        print(json.dumps(output, indent=2))
    else:
        print_summary(summary, check)

    if check is not None and not check.ok:
        return EXIT_VERIFICATION_FAILED
    return EXIT_SUCCESS
