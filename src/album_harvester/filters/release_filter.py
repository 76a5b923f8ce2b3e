"""Filtering of catalog items returned for an artist."""

import logging
from typing import Any, Dict, Iterable, List

from ..models import Release

logger = logging.getLogger(__name__)

EXCLUDED_TYPES = ("compilation",)


class ReleaseFilter:
    """Keep only an artist's own albums and singles."""

    def __init__(self, excluded_types: Iterable[str] = EXCLUDED_TYPES):
        self.excluded = {t.lower() for t in excluded_types}

    def filter(self, items: List[Dict[str, Any]], artist_id: str) -> List[Release]:
        """Filter raw page items and map the survivors to releases."""
        releases = []
        for item in items:
            if self._should_include(item, artist_id):
                releases.append(Release.from_api(item))
            else:
                logger.debug(
                    f"Filtered out: {item.get('name')} "
                    f"(type: {item.get('album_type')})"
                )
        return releases

    def _should_include(self, item: Dict[str, Any], artist_id: str) -> bool:
        """
        Determine if an item belongs in the collection.

        Logic:
        1. Compilations are rejected
        2. Items where the artist is not credited ("appears on") are rejected
        """
        album_type = (item.get("album_type") or "").lower()
        if album_type in self.excluded:
            return False

        credited = item.get("artists") or []
        return any(artist.get("id") == artist_id for artist in credited)
