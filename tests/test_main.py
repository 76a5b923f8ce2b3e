"""Tests for the command-line entry point."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

import album_harvester.main as main
from album_harvester import config
from album_harvester.config import ConfigurationError, require_credentials
from album_harvester.models import HarvestSummary


@pytest.mark.parametrize("client_id, client_secret", [("", "secret"), ("id", ""), ("", "")])
def test_require_credentials_rejects_missing_values(client_id: str, client_secret: str) -> None:
    with pytest.raises(ConfigurationError):
        require_credentials(client_id, client_secret)


def test_main_exits_non_zero_without_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "SPOTIFY_CLIENT_ID", "")
    monkeypatch.setattr(config, "SPOTIFY_CLIENT_SECRET", "")

    def fail_build() -> None:
        raise AssertionError("no harvester should be built")

    monkeypatch.setattr(main, "build_harvester", fail_build)

    with pytest.raises(SystemExit) as excinfo:
        sys.exit(main.main())

    assert excinfo.value.code == 1


def _stub_harvester(monkeypatch: pytest.MonkeyPatch, summary: HarvestSummary) -> None:
    monkeypatch.setattr(config, "SPOTIFY_CLIENT_ID", "id")
    monkeypatch.setattr(config, "SPOTIFY_CLIENT_SECRET", "secret")

    class _Harvester:
        def run(self) -> HarvestSummary:
            return summary

    monkeypatch.setattr(main, "build_harvester", lambda: _Harvester())


def test_run_harvest_returns_summary(monkeypatch: pytest.MonkeyPatch) -> None:
    expected = HarvestSummary(artists_processed=3, total_releases=7, published=False)
    _stub_harvester(monkeypatch, expected)

    assert main.run_harvest() is expected


@pytest.mark.parametrize(
    "summary",
    [
        HarvestSummary(artists_processed=3, total_releases=7, published=True),
        HarvestSummary(artists_processed=3, failed_artists=["Second"], published=False),
    ],
)
def test_successful_run_exits_zero(monkeypatch: pytest.MonkeyPatch, summary: HarvestSummary) -> None:
    _stub_harvester(monkeypatch, summary)

    with pytest.raises(SystemExit) as excinfo:
        sys.exit(main.main())

    assert excinfo.value.code == 0


@pytest.mark.parametrize("enabled", [True, False])
def test_build_harvester_honours_publish_setting(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, enabled: bool
) -> None:
    monkeypatch.setattr(config, "DATA_DIR", str(tmp_path))
    monkeypatch.setattr(config, "PUBLISH_ENABLED", enabled)
    monkeypatch.setattr(config, "BATCH_SIZE", 10)
    monkeypatch.setattr(config, "BATCHES_PER_RUN", 2)

    harvester = main.build_harvester()

    assert (harvester.publisher is not None) is enabled
    assert harvester.state_manager.data_dir == tmp_path
    assert harvester.batch_size == 10
    assert harvester.batches_per_run == 2


def test_data_dir_defaults_to_working_directory(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setattr(config, "DATA_DIR", "")
    monkeypatch.setattr(config, "PUBLISH_ENABLED", True)
    monkeypatch.chdir(tmp_path)
    expected = tmp_path.resolve()

    harvester = main.build_harvester()

    assert config.data_dir() == expected
    assert harvester.state_manager.artists_path == expected / "artists.json"
    assert harvester.publisher is not None
    assert harvester.publisher.repo_dir == expected
