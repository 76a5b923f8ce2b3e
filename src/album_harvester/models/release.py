"""Data model for harvested releases."""

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass
class Release:
    """Represents an album or single returned by the catalog for an artist."""

    id: str
    title: str
    artist_credit: str
    release_date: str
    cover_url: str
    external_url: str
    release_type: str  # 'album' or 'single'
    total_tracks: int

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if not isinstance(other, Release):
            return False
        return self.id == other.id

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "Release":
        """Build a release from a Spotify simplified album object."""
        images = item.get("images") or []
        external_urls = item.get("external_urls") or {}
        return cls(
            id=item["id"],
            title=item["name"],
            artist_credit=", ".join(a["name"] for a in item["artists"]),
            release_date=item.get("release_date") or "",
            cover_url=images[0]["url"] if images else "",
            external_url=external_urls.get("spotify", ""),
            release_type=item["album_type"],
            total_tracks=int(item.get("total_tracks") or 0),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Release":
        """Build a release from a persisted record."""
        return cls(
            id=data["id"],
            title=data.get("title", ""),
            artist_credit=data.get("artist_credit", ""),
            release_date=data.get("release_date", ""),
            cover_url=data.get("cover_url", ""),
            external_url=data.get("external_url", ""),
            release_type=data.get("release_type", ""),
            total_tracks=int(data.get("total_tracks") or 0),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with keys in field order."""
        return asdict(self)

    def same_fields(self, other: "Release") -> bool:
        """Compare every field, not just identity."""
        return asdict(self) == asdict(other)
