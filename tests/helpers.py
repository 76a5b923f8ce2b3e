"""Fakes and builders shared by the harvester tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import requests

_NOT_JSON = object()


def album_item(
    album_id: str,
    artist_ids: list[str],
    album_type: str = "album",
    name: str | None = None,
    images: list[str] | None = None,
) -> dict[str, Any]:
    """Build a Spotify simplified album object."""
    if images is None:
        images = [f"https://i.scdn.co/image/{album_id}-640", f"https://i.scdn.co/image/{album_id}-300"]
    return {
        "id": album_id,
        "name": name or f"Album {album_id}",
        "album_type": album_type,
        "artists": [{"id": a, "name": f"Artist {a}"} for a in artist_ids],
        "release_date": "2021-03-05",
        "images": [{"url": url, "height": 640, "width": 640} for url in images],
        "external_urls": {"spotify": f"https://open.spotify.com/album/{album_id}"},
        "total_tracks": 10,
    }


class FakeResponse:
    def __init__(self, payload: Any = None, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)  # type: ignore[arg-type]

    def json(self) -> Any:
        if self._payload is _NOT_JSON:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


def not_json_response(status_code: int = 200) -> FakeResponse:
    return FakeResponse(_NOT_JSON, status_code)


class FakeSession:
    """Serves canned responses by URL and records every call."""

    def __init__(
        self,
        routes: dict[str, Any] | None = None,
        post_response: Any = None,
    ) -> None:
        self.headers: dict[str, str] = {}
        self.routes = routes or {}
        self.post_response = post_response
        self.calls: list[dict[str, Any]] = []
        self.posts: list[dict[str, Any]] = []

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        response = self.routes.get(url)
        if response is None:
            return FakeResponse({"error": "not found"}, status_code=404)
        if isinstance(response, Exception):
            raise response
        return response

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        self.posts.append({"url": url, **kwargs})
        if isinstance(self.post_response, Exception):
            raise self.post_response
        return self.post_response


def write_json(path: Path, payload: Any) -> None:
    path.write_text(json.dumps(payload), encoding="utf-8")


