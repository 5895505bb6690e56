"""
Envelope parsing and encoding.

Two entry points build an envelope from a decoded JSON mapping: one for an
object payload, one for an array payload. The caller picks the one matching
the endpoint's contract and supplies the per-type mapping function.
"""

import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional, TypeVar

from api_envelope.codec.fields import (
    ensure_mapping,
    format_timestamp,
    optional_timestamp,
    require,
)
from api_envelope.errors import EnvelopeError, MissingFieldError, TypeMismatchError
from api_envelope.models.envelope import Envelope
from api_envelope.models.pagination import PaginationInfo

logger = logging.getLogger(__name__)

T = TypeVar("T")

DATA_KEY = "data"
PAGINATION_KEY = "pagination"
CREATED_AT_KEY = "createdAt"
UPDATED_AT_KEY = "updatedAt"


def _map_item(item: Any, from_json_t: Callable[[Mapping[str, Any]], T], path: str) -> T:
    """Apply the caller's mapping function, translating its raw failures."""
    record = ensure_mapping(item, path)
    try:
        return from_json_t(record)
    except EnvelopeError:
        raise
    except KeyError as e:
        key = e.args[0] if e.args else "?"
        raise MissingFieldError(f"{path}.{key}") from e
    except (TypeError, ValueError) as e:
        raise TypeMismatchError(path, "payload object", record, f"Field '{path}' could not be mapped: {e}") from e


def _metadata(raw: Mapping[str, Any]) -> dict[str, Any]:
    pagination: Optional[PaginationInfo] = None
    if raw.get(PAGINATION_KEY) is not None:
        pagination = PaginationInfo.from_json(raw[PAGINATION_KEY], PAGINATION_KEY)
    return {
        "pagination": pagination,
        "created_at": optional_timestamp(raw, CREATED_AT_KEY),
        "updated_at": optional_timestamp(raw, UPDATED_AT_KEY),
    }


def parse_envelope(raw: Mapping[str, Any], from_json_t: Callable[[Mapping[str, Any]], T]) -> Envelope[T]:
    """Parse an envelope whose ``data`` is a single object."""
    raw = ensure_mapping(raw, "$")
    payload = _map_item(require(raw, DATA_KEY), from_json_t, DATA_KEY)
    return Envelope(data=payload, **_metadata(raw))


def parse_envelope_list(
    raw: Mapping[str, Any], from_json_t: Callable[[Mapping[str, Any]], T],
) -> Envelope[tuple[T, ...]]:
    """Parse an envelope whose ``data`` is an array of objects. An empty array is valid."""
    raw = ensure_mapping(raw, "$")
    items = require(raw, DATA_KEY)
    if not isinstance(items, (list, tuple)):
        raise TypeMismatchError(DATA_KEY, "array", items)
    payload = tuple(_map_item(item, from_json_t, f"{DATA_KEY}[{i}]") for i, item in enumerate(items))
    logger.debug("Parsed list envelope with %d item(s)", len(payload))
    return Envelope(data=payload, is_list=True, **_metadata(raw))


def dump_envelope(envelope: Envelope[Any], to_json_t: Callable[[Any], Any]) -> dict[str, Any]:
    """Encode an envelope back to its JSON mapping. Absent optionals are omitted."""
    if envelope.is_list:
        data: Any = [to_json_t(item) for item in envelope.data]
    else:
        data = to_json_t(envelope.data)
    out: dict[str, Any] = {DATA_KEY: data}
    if envelope.pagination is not None:
        out[PAGINATION_KEY] = envelope.pagination.to_json()
    if envelope.created_at is not None:
        out[CREATED_AT_KEY] = format_timestamp(envelope.created_at)
    if envelope.updated_at is not None:
        out[UPDATED_AT_KEY] = format_timestamp(envelope.updated_at)
    return out
