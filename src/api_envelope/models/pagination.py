"""
Pagination metadata carried alongside a list payload.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from api_envelope.codec.fields import ensure_mapping, require_int


class PaginationInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: int
    page: int  # opaque, no 0- or 1-based assumption

    @classmethod
    def from_json(cls, raw: Mapping[str, Any], path: str = "pagination") -> "PaginationInfo":
        raw = ensure_mapping(raw, path)
        return cls(total=require_int(raw, "total", path), page=require_int(raw, "page", path))

    def to_json(self) -> dict[str, Any]:
        return {"total": self.total, "page": self.page}
