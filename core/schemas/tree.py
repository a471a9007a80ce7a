"""
Schemas
File: tree.py

Purpose: Serializable summaries of a built Merkle tree, used for
display and machine-readable output.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


InputMode = Literal["raw", "digests"]


class TreeSummary(BaseModel):
    """Summary of a constructed Merkle tree."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    root: str = Field(..., description="Root digest rendered as hex")
    leaf_count: int = Field(..., ge=1, description="Number of input blocks")
    depth: int = Field(..., ge=1, description="Levels from leaves to root, inclusive")
    input_mode: InputMode = Field(
        default="raw",
        description="Whether leaves were hashed from raw blocks or given as digests",
    )
    hash_algorithm: str = Field(default="sha256")
    levels: list[list[str]] | None = Field(
        default=None,
        description="Hex digests of each level, root level first",
    )


class RootCheck(BaseModel):
    """Result of comparing a computed root against an expected one."""

    ok: bool
    expected: str
    actual: str
