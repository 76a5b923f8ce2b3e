"""Pytest fixtures for the harvester tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.helpers import write_json


@pytest.fixture
def artists_payload() -> list[dict[str, str]]:
    return [
        {"id": "a1", "name": "First"},
        {"id": "a2", "name": "Second"},
        {"id": "a3", "name": "Third"},
    ]


@pytest.fixture
def data_dir(tmp_path: Path, artists_payload: list[dict[str, str]]) -> Path:
    write_json(tmp_path / "artists.json", artists_payload)
    return tmp_path
