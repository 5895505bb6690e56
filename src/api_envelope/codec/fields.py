"""
Typed field extraction for decoded JSON mappings.

Every helper takes the dotted ``path`` of the value it reads so errors point at
the exact location in the document (``pagination.total``, ``data[2].email``).
"""

import logging
from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Any, Optional

from api_envelope.errors import FormatError, MissingFieldError, TypeMismatchError

logger = logging.getLogger(__name__)


def join_path(parent: str, key: str) -> str:
    return f"{parent}.{key}" if parent else key


def ensure_mapping(value: Any, path: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise TypeMismatchError(path, "object", value)
    return value


def require(raw: Mapping[str, Any], key: str, parent: str = "") -> Any:
    """Return ``raw[key]``; an absent key raises MissingFieldError."""
    try:
        return raw[key]
    except KeyError:
        path = join_path(parent, key)
        logger.debug("Required field %s absent (keys: %s)", path, list(raw))
        raise MissingFieldError(path) from None


def require_int(raw: Mapping[str, Any], key: str, parent: str = "") -> int:
    value = require(raw, key, parent)
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeMismatchError(join_path(parent, key), "integer", value)
    return value


def parse_timestamp(value: Any, path: str) -> datetime:
    """Parse an ISO-8601 string. Offsets are kept as given, naive stays naive."""
    if not isinstance(value, str):
        raise TypeMismatchError(path, "ISO-8601 string", value)
    try:
        return datetime.fromisoformat(value)
    except ValueError as e:
        logger.debug("Rejected timestamp %s=%r: %s", path, value, e)
        raise FormatError(path, value) from e


def optional_timestamp(raw: Mapping[str, Any], key: str) -> Optional[datetime]:
    """Absent and null both map to None; anything else must parse."""
    value = raw.get(key)
    if value is None:
        return None
    return parse_timestamp(value, key)


def format_timestamp(value: datetime) -> str:
    """Render a datetime as ISO-8601, using ``Z`` for UTC."""
    text = value.isoformat()
    if value.utcoffset() == timedelta(0) and text.endswith("+00:00"):
        return text[: -len("+00:00")] + "Z"
    return text
