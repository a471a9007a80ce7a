"""
CLI Demo Command

Hash the fixed example blocks "block1".."block4" and print the root.

Usage:
    merkle demo [--json]
"""

from __future__ import annotations

import json
from argparse import Namespace

from core.config.runtime import RuntimeConfig
from core.merkle.merkle_tree import build_merkle_tree, summarize_tree


EXAMPLE_BLOCKS: tuple[bytes, ...] = (b"block1", b"block2", b"block3", b"block4")


def demo_cmd(args: Namespace) -> int:
    """Handle demo command."""
    config: RuntimeConfig = getattr(args, "cli_config", None) or RuntimeConfig()

    root = build_merkle_tree(EXAMPLE_BLOCKS)
    summary = summarize_tree(
        root,
        leaf_count=len(EXAMPLE_BLOCKS),
        hex_prefix=config.display.hex_prefix,
    )

    if args.json:
        output = summary.model_dump(exclude_none=True)
        output["blocks"] = [block.decode("ascii") for block in EXAMPLE_BLOCKS]
        print(json.dumps(output, indent=2))
    else:
        print(f"Merkle Root Hash: {summary.root}")

    return 0
