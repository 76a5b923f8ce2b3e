"""Fetch an artist's albums and singles from the Spotify Web API."""

from typing import Any, Dict, Iterator, List, Optional

import requests

from ..config import API_BASE_URL, INCLUDE_GROUPS, PAGE_SIZE
from ..filters import ReleaseFilter
from ..models import Artist, FetchOutcome, Release
from .base import BaseClient

# Errors that only cost one artist its releases for this run
FETCH_ERRORS = (
    requests.RequestException,
    ValueError,
    KeyError,
    TypeError,
    AttributeError,
)


class SpotifyCatalog(BaseClient):
    """
    Release lookups against ``/artists/{id}/albums``.

    Pages are followed through the ``next`` link of each response until the
    API stops returning one.
    """

    def __init__(
        self,
        release_filter: Optional[ReleaseFilter] = None,
        base_url: str = API_BASE_URL,
        page_size: int = PAGE_SIZE,
        session: Optional[requests.Session] = None,
        **kwargs,
    ):
        super().__init__(session=session, **kwargs)
        self.release_filter = release_filter or ReleaseFilter()
        self.base_url = base_url.rstrip("/")
        self.page_size = page_size

    def albums_url(self, artist_id: str) -> str:
        return f"{self.base_url}/artists/{artist_id}/albums"

    def iter_pages(
        self,
        url: str,
        token: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Iterator[Dict[str, Any]]:
        """Yield each page, following ``next`` links until there are none."""
        next_url: Optional[str] = url
        while next_url:
            page = self._get_json(next_url, token, params=params)
            yield page
            # The next link already carries the query string
            params = None
            next_url = page.get("next")

    def fetch_releases(self, artist_id: str, token: str) -> List[Release]:
        """Return every album and single credited to the artist."""
        releases: List[Release] = []
        params = {
            "limit": self.page_size,
            "include_groups": ",".join(INCLUDE_GROUPS),
        }
        for page in self.iter_pages(self.albums_url(artist_id), token, params=params):
            items = page.get("items") or []
            releases.extend(self.release_filter.filter(items, artist_id))
        return releases

    def fetch_outcome(self, artist: Artist, token: str) -> FetchOutcome:
        """Fetch one artist, converting failures into a failed outcome."""
        self.logger.info(f"Fetching albums for: {artist.name}")
        try:
            releases = self.fetch_releases(artist.id, token)
        except FETCH_ERRORS as e:
            self.logger.error(f"Error fetching artist {artist.name} ({artist.id}): {e}")
            return FetchOutcome.failure(artist, str(e))

        self.logger.info(f"Found {len(releases)} albums for {artist.name}")
        return FetchOutcome(artist=artist, releases=releases)
