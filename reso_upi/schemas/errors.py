"""
Schemas & Registry
File: errors.py

Purpose: Standard error taxonomy for the UPI codec.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across the codec."""

    # Versioning
    UNKNOWN_VERSION = "UNKNOWN_VERSION"
    UNSUPPORTED_VERSION = "UNSUPPORTED_VERSION"

    # Input
    MALFORMED_UPI = "MALFORMED_UPI"
    INVALID_INPUT = "INVALID_INPUT"
    AMBIGUOUS_VALUE = "AMBIGUOUS_VALUE"

    # Registry
    SCHEMA_DEFINITION_ERROR = "SCHEMA_DEFINITION_ERROR"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class UpiError(BaseModel):
    """
    Error model for structured error communication.

    Callers that report failures over a transport (HTTP, queues, logs)
    can serialize this model instead of the exception.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.MALFORMED_UPI],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )

    def to_exception(self) -> "UpiException":
        """Convert this error model to a raised exception."""
        return UpiException(
            code=self.code,
            message=self.message,
            details=self.details,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class UpiException(Exception):
    """
    Base exception for all UPI codec errors.

    Carries structured error information and can be converted
    to/from UpiError models.
    """

    def __init__(
        self,
        message: str,
        code: str = "UPI_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_error_model(self) -> UpiError:
        """Convert this exception to a UpiError model."""
        return UpiError(
            code=self.code,
            message=self.message,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class UnknownVersionError(UpiException):
    """Raised when no schema is registered for a format version."""

    def __init__(
        self,
        version: str,
        known: list[str] | None = None,
    ) -> None:
        self.version = version
        self.known = sorted(known or [])
        super().__init__(
            message=f"Invalid version: {version}",
            code=ErrorCodes.UNKNOWN_VERSION,
            details={"version": version, "known_versions": self.known},
        )


class UnsupportedVersionError(UpiException):
    """Raised when a version is registered but has no decoding strategy."""

    def __init__(
        self,
        version: str,
        supported: list[str] | None = None,
    ) -> None:
        self.version = version
        self.supported = sorted(supported or [])
        super().__init__(
            message=f"Unsupported version: {version}!",
            code=ErrorCodes.UNSUPPORTED_VERSION,
            details={"version": version, "supported_versions": self.supported},
        )


class MalformedInputError(UpiException):
    """Raised when a URN cannot be decoded."""

    def __init__(
        self,
        upi: str | None,
        reason: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["upi"] = upi
        if reason:
            full_details["reason"] = reason
        super().__init__(
            message=f"Malformed UPI!: {upi}",
            code=ErrorCodes.MALFORMED_UPI,
            details=full_details,
        )


class InvalidInputError(UpiException):
    """Raised when an operation receives input it cannot process."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_INPUT,
            details=details,
        )


class AmbiguousValueError(UpiException):
    """Raised in strict mode when a value would collide with a segment name."""

    def __init__(
        self,
        field_name: str,
        value: str,
        segment: str,
    ) -> None:
        super().__init__(
            message=(
                f"Value for {field_name} contains segment token "
                f"':{segment}:' and cannot be decoded unambiguously: {value!r}"
            ),
            code=ErrorCodes.AMBIGUOUS_VALUE,
            details={"field": field_name, "value": value, "segment": segment},
        )


class SchemaDefinitionError(UpiException):
    """Raised when a schema or registry definition breaks its invariants."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.SCHEMA_DEFINITION_ERROR,
            details=details,
        )

