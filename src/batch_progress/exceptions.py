"""Exceptions for batch progress tracking."""

from typing import Optional

from pydantic import ValidationError


class BatchProgressError(Exception):
    """Base exception for batch progress errors."""


class ConfigurationError(BatchProgressError):
    """Exception raised when tracker or logging settings are invalid."""
    
    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        super().__init__(message)
        self.field = field
        self.original_error = original_error
    
    @classmethod
    def from_validation_error(cls, prefix: str, error: ValidationError) -> "ConfigurationError":
        """Wrap a pydantic error, keeping the location of the first failure."""
        return cls(
            f"{prefix}: {describe_validation_error(error)}",
            field=first_error_field(error),
            original_error=error
        )


def describe_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic error into a single readable line"""
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "<root>"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


def first_error_field(error: ValidationError) -> str:
    errors = error.errors()
    if not errors:
        return ""
    return ".".join(str(part) for part in errors[0]["loc"])
