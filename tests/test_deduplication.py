"""Tests for merging and deduplicating the release collection."""

from __future__ import annotations

from dataclasses import replace

from album_harvester.filters import Deduplicator
from album_harvester.models import Release


def _release(release_id: str, cover_url: str = "https://img/old") -> Release:
    return Release(
        id=release_id,
        title=f"Title {release_id}",
        artist_credit="Someone",
        release_date="2020",
        cover_url=cover_url,
        external_url=f"https://open.spotify.com/album/{release_id}",
        release_type="album",
        total_tracks=9,
    )


def test_merge_with_itself_is_idempotent() -> None:
    collection = [_release("r1"), _release("r2"), _release("r3")]

    merged = Deduplicator().merge(collection, collection)

    assert [r.id for r in merged] == ["r1", "r2", "r3"]
    assert all(a.same_fields(b) for a, b in zip(merged, collection))


def test_newer_entry_overwrites_older_one() -> None:
    old = _release("r1", cover_url="https://img/old")
    new = replace(old, cover_url="https://img/new")

    merged = Deduplicator().merge([old, _release("r2")], [new])

    assert len(merged) == 2
    assert merged[0].id == "r1"
    assert merged[0].cover_url == "https://img/new"


def test_deduplicate_keeps_first_position_of_each_id() -> None:
    releases = [_release("a"), _release("b"), _release("a", "https://img/2"), _release("c")]

    unique = Deduplicator().deduplicate(releases)

    assert [r.id for r in unique] == ["a", "b", "c"]
    assert unique[0].cover_url == "https://img/2"


def test_merge_of_empty_inputs_is_empty() -> None:
    assert Deduplicator().merge([], []) == []
