"""
Schemas - Error Taxonomy
File: errors.py

Purpose: Standard error taxonomy for chunktree.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.

None of these failures are retryable: tree construction and comparison
are deterministic, so repeating a call with the same inputs fails the same way.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across chunktree."""

    # Input & Configuration Errors
    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
    CONFIG_LOAD_ERROR = "CONFIG_LOAD_ERROR"

    # Comparison Errors
    INCONGRUENT_TREES = "INCONGRUENT_TREES"

    # Hash Collaborator Errors
    HASH_FAILURE = "HASH_FAILURE"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class ChunkTreeError(BaseModel):
    """
    Base error model for structured error communication.

    Used by the CLI to report failures as JSON without tracebacks.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.INVALID_CONFIGURATION],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    def to_exception(self) -> "ChunkTreeException":
        """Convert this error model to a raised exception."""
        return ChunkTreeException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class ChunkTreeException(Exception):
    """
    Base exception for all chunktree errors.

    This exception carries structured error information and can be
    converted to/from ChunkTreeError models.
    """

    def __init__(
        self,
        message: str,
        code: str = "CHUNKTREE_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> ChunkTreeError:
        """Convert this exception to a ChunkTreeError model."""
        return ChunkTreeError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class InvalidConfigurationException(ChunkTreeException):
    """Raised for a non-positive leaf size, empty content, or an unusable setting."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if field:
            full_details["field"] = field
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_CONFIGURATION,
            details=full_details,
            retryable=False,
        )


class IncongruentTreesException(ChunkTreeException):
    """Raised when a leaf diff is requested between trees of different height."""

    def __init__(
        self,
        message: str,
        left_height: int | None = None,
        right_height: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if left_height is not None:
            full_details["left_height"] = left_height
        if right_height is not None:
            full_details["right_height"] = right_height
        super().__init__(
            message=message,
            code=ErrorCodes.INCONGRUENT_TREES,
            details=full_details,
            retryable=False,
        )


class HashFailureException(ChunkTreeException):
    """Raised when the hash function collaborator fails."""

    def __init__(
        self,
        message: str,
        algorithm: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if algorithm:
            full_details["algorithm"] = algorithm
        super().__init__(
            message=message,
            code=ErrorCodes.HASH_FAILURE,
            details=full_details,
            retryable=False,
        )


class ConfigLoadException(ChunkTreeException):
    """Raised when a configuration file cannot be read or parsed."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if path:
            full_details["path"] = path
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIG_LOAD_ERROR,
            details=full_details,
            retryable=False,
        )
