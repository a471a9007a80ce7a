"""
Schemas
File: __init__.py

Purpose: Export the public API for the schemas module.
"""

# Error models and exceptions
from .errors import (
    BlockInputException,
    ConfigException,
    EmptyInputException,
    ErrorCodes,
    InvalidDigestException,
    InvalidNodeException,
    MerkleError,
    MerkleException,
)

# Tree summaries
from .tree import (
    InputMode,
    RootCheck,
    TreeSummary,
)

__all__ = [
    # Errors
    "ErrorCodes",
    "MerkleError",
    "MerkleException",
    "InvalidNodeException",
    "EmptyInputException",
    "InvalidDigestException",
    "BlockInputException",
    "ConfigException",
    # Tree summaries
    "InputMode",
    "RootCheck",
    "TreeSummary",
]
