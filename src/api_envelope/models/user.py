"""
Example payload type.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    email: str

    @classmethod
    def from_json(cls, raw: Mapping[str, Any]) -> "User":
        return cls(name=raw["name"], email=raw["email"])

    def to_json(self) -> dict[str, Any]:
        return {"name": self.name, "email": self.email}
