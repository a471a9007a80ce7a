"""
Merkle CLI

Command-line interface for the Merkle root builder.

Usage:
    python -m merkle_cli demo
    python -m merkle_cli root a.bin b.bin c.bin
    python -m merkle_cli root --block block1 --block block2 --json
"""

__version__ = "0.1.0"
