"""Data model for the artists being harvested."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Artist:
    """An entry of the read-only artist list."""

    id: str
    name: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Artist":
        return cls(id=data["id"], name=data.get("name", data["id"]))
