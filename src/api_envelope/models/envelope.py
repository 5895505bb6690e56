"""
Generic response envelope — payload plus optional pagination and timestamps.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Callable, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

from api_envelope.models.pagination import PaginationInfo

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Immutable typed view of ``{"data", "pagination", "createdAt", "updatedAt"}``.

    ``data`` is a single ``T`` or a ``tuple[T, ...]`` depending on which
    constructor built it, and ``is_list`` records which one. Use
    :meth:`from_json` for an object payload and :meth:`list_from_json` for an
    array payload; the shape is never guessed from ``data``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    data: T
    pagination: Optional[PaginationInfo] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    is_list: bool = False

    @classmethod
    def from_json(cls, raw: Mapping[str, Any], from_json_t: Callable[[Mapping[str, Any]], T]) -> Envelope[T]:
        from api_envelope.codec.envelope import parse_envelope
        return parse_envelope(raw, from_json_t)

    @classmethod
    def list_from_json(
        cls, raw: Mapping[str, Any], from_json_t: Callable[[Mapping[str, Any]], T],
    ) -> Envelope[tuple[T, ...]]:
        from api_envelope.codec.envelope import parse_envelope_list
        return parse_envelope_list(raw, from_json_t)

    def to_json(self, to_json_t: Callable[[Any], Any]) -> dict[str, Any]:
        from api_envelope.codec.envelope import dump_envelope
        return dump_envelope(self, to_json_t)

    @property
    def items(self) -> list[Any]:
        """The payload as a list: list payloads copied, a single payload wrapped."""
        if self.is_list:
            return list(self.data)
        return [self.data]
