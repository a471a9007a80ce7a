"""
Schemas
File: errors.py

Purpose: Error taxonomy for Merkle tree construction.
Defines both a Pydantic model for structured error reporting
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Construction Errors
    INVALID_NODE = "INVALID_NODE"
    EMPTY_INPUT = "EMPTY_INPUT"
    INVALID_DIGEST = "INVALID_DIGEST"

    # Input & Configuration Errors
    INPUT_READ_ERROR = "INPUT_READ_ERROR"
    CONFIG_ERROR = "CONFIG_ERROR"

    # Commitment Errors
    ROOT_MISMATCH = "ROOT_MISMATCH"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class MerkleError(BaseModel):
    """
    Error model for structured error reporting.

    Used when an error has to be serialized (e.g. CLI JSON output)
    rather than raised.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.INVALID_NODE],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )

    def to_exception(self) -> "MerkleException":
        """Convert this error model to a raised exception."""
        return MerkleException(
            code=self.code,
            message=self.message,
            details=self.details,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class MerkleException(Exception):
    """
    Base exception for all Merkle tree errors.

    Carries structured error information and can be converted
    to a MerkleError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "MERKLE_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_error_model(self) -> MerkleError:
        """Convert this exception to a MerkleError model."""
        return MerkleError(
            code=self.code,
            message=self.message,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class InvalidNodeException(MerkleException):
    """Raised when a node is constructed with an invalid shape."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_NODE,
            details=details,
        )


class EmptyInputException(MerkleException):
    """Raised when a tree is requested for an empty input sequence."""

    def __init__(
        self,
        message: str = "Cannot build a Merkle tree from an empty input sequence",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.EMPTY_INPUT,
            details=details,
        )


class InvalidDigestException(MerkleException):
    """Raised when a pre-computed digest is malformed."""

    def __init__(
        self,
        message: str,
        index: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if index is not None:
            full_details["index"] = index
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_DIGEST,
            details=full_details,
        )


class BlockInputException(MerkleException):
    """Raised when input blocks cannot be read."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if source:
            full_details["source"] = source
        super().__init__(
            message=message,
            code=ErrorCodes.INPUT_READ_ERROR,
            details=full_details,
        )


class ConfigException(MerkleException):
    """Raised when the runtime configuration is invalid."""

    def __init__(
        self,
        message: str,
        field_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if field_path:
            full_details["field_path"] = field_path
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIG_ERROR,
            details=full_details,
        )
