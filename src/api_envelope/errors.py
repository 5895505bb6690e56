"""
api-envelope error types — construction failures raised while parsing an envelope.
"""

from typing import Any, Optional


class EnvelopeError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class MissingFieldError(EnvelopeError):
    """A required key is absent from the input mapping."""

    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__("missing_field", message or f"Missing required field '{field}'", {"field": field})
        self.field = field


class TypeMismatchError(EnvelopeError):
    """A value is present but not of the expected shape."""

    def __init__(self, field: str, expected: str, actual: Any, message: Optional[str] = None):
        actual_name = type(actual).__name__
        super().__init__(
            "type_mismatch",
            message or f"Field '{field}' expected {expected}, got {actual_name}",
            {"field": field, "expected": expected, "actual": actual_name},
        )
        self.field = field


class FormatError(EnvelopeError):
    """A timestamp string is not valid ISO-8601."""

    def __init__(self, field: str, value: str):
        super().__init__(
            "format_error",
            f"Field '{field}' is not an ISO-8601 timestamp: {value!r}",
            {"field": field, "value": value},
        )
        self.field = field
