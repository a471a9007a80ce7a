"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m merkle_cli demo [--json]
    python -m merkle_cli root FILE... [--block TEXT]... [--levels] [--expect HEX] [--json]
    python -m merkle_cli root --digest HEX... [--expect HEX] [--json]
    python -m merkle_cli config --init [--path merkle.yaml]
    python -m merkle_cli config --show

Environment Variables:
    MERKLE_HASH_ALGORITHM   Hash algorithm (only sha256)
    MERKLE_HEX_PREFIX       Render digests with 0x prefix (default: false)
    MERKLE_LOG_LEVEL        Log level (default: INFO)
    MERKLE_LOG_FILE         Also log to this file
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from merkle_cli import __version__
from merkle_cli.commands import demo, root
from core.config.runtime import LOG_LEVELS, load_config, get_default_config_template
from core.schemas.errors import MerkleException


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="merkle",
        description="Merkle root builder - compute tamper-evident digests of ordered data blocks.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./merkle.yaml or ~/.config/merkle/config.yaml)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=list(LOG_LEVELS),
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- demo command ---
    demo_parser = subparsers.add_parser(
        "demo",
        help="Print the root of the example blocks block1..block4",
    )
    demo_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON summary",
    )
    demo_parser.set_defaults(func=demo.demo_cmd)

    # --- root command ---
    root_parser = subparsers.add_parser(
        "root",
        help="Compute the Merkle root of files, text blocks or digests",
        description=(
            "Build a Merkle tree and print its root. Each file is one block; "
            "file blocks come first, then --block values, in the order given."
        ),
    )
    root_parser.add_argument(
        "files",
        nargs="*",
        help="Files to use as blocks (one block per file)",
    )
    root_parser.add_argument(
        "--block", "-b",
        action="append",
        default=None,
        help="Literal text block (UTF-8); may be repeated",
    )
    root_parser.add_argument(
        "--digest", "-d",
        action="append",
        default=None,
        help="Pre-computed leaf digest in hex; may be repeated (not hashed again)",
    )
    root_parser.add_argument(
        "--expect",
        type=str,
        default=None,
        help="Expected root in hex; exit with code 2 on mismatch",
    )
    root_parser.add_argument(
        "--levels",
        action="store_true",
        default=False,
        help="Include every level of the tree, root first",
    )
    root_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON summary",
    )
    root_parser.set_defaults(func=root.root_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage CLI configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="merkle.yaml",
        help="Path for config file (default: merkle.yaml)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("\nEdit this file to configure your settings.")
        print("You can also use environment variables (MERKLE_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.cli_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: merkle config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=root mismatch)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_config(args.config)
    except (OSError, MerkleException) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    log_level = args.log_level or config.logging.level
    setup_logging(level=log_level, log_file=config.logging.file)

    args.cli_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if log_level.upper() == "DEBUG":
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
