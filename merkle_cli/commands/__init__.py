"""
CLI command modules.
"""

from merkle_cli.commands import demo, root

__all__ = ["demo", "root"]
