"""State management for the artist list, release collection and run metadata."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, List

from ..config import ALBUMS_FILE, ARTISTS_FILE, META_FILE
from ..models import Artist, Release, RunMetadata

logger = logging.getLogger(__name__)


class StateError(Exception):
    """Raised when an input or persisted file cannot be read."""

    pass


class StateManager:
    """Load and persist the JSON files a harvest run works on."""

    def __init__(
        self,
        data_dir: Path,
        artists_file: str = ARTISTS_FILE,
        releases_file: str = ALBUMS_FILE,
        metadata_file: str = META_FILE,
    ):
        self.data_dir = Path(data_dir)
        self.artists_path = self.data_dir / artists_file
        self.releases_path = self.data_dir / releases_file
        self.metadata_path = self.data_dir / metadata_file

    def output_files(self) -> List[Path]:
        """Files rewritten by every run."""
        return [self.releases_path, self.metadata_path]

    def _read_json(self, path: Path) -> Any:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _write_json(self, path: Path, payload: Any):
        """Write the whole file through a temp file and an atomic replace."""
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.stem}.",
            suffix=".tmp",
        )
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
                f.write("\n")
            os.replace(tmp_path, path)
        except Exception:
            tmp_path.unlink(missing_ok=True)
            raise

    def load_artists(self) -> List[Artist]:
        """Load the artist list in file order."""
        try:
            data = self._read_json(self.artists_path)
            artists = [Artist.from_dict(entry) for entry in data]
        except (OSError, ValueError, KeyError, TypeError) as e:
            raise StateError(f"Failed to load artists from {self.artists_path}: {e}") from e

        logger.info(f"Loaded {len(artists)} artists")
        return artists

    def load_releases(self) -> List[Release]:
        """Load the accumulated release collection, empty if never written."""
        if not self.releases_path.exists():
            logger.info("No release collection yet, starting empty")
            return []
        try:
            data = self._read_json(self.releases_path)
            releases = [Release.from_dict(entry) for entry in data]
        except (OSError, ValueError, KeyError, TypeError) as e:
            raise StateError(
                f"Failed to load releases from {self.releases_path}: {e}"
            ) from e

        logger.info(f"Loaded {len(releases)} releases")
        return releases

    def load_metadata(self) -> RunMetadata:
        """Load run metadata, falling back to defaults."""
        if self.metadata_path.exists():
            try:
                data = self._read_json(self.metadata_path)
                metadata = RunMetadata.from_dict(data)
                logger.info(
                    f"Loaded metadata, next batch index {metadata.last_batch_index}"
                )
                return metadata
            except (ValueError, OSError, AttributeError, TypeError) as e:
                logger.warning(f"Failed to load metadata file: {e}")

        return RunMetadata()

    def save_releases(self, releases: List[Release]):
        """Persist the release collection."""
        self._write_json(self.releases_path, [r.to_dict() for r in releases])
        logger.info(f"Saved {len(releases)} releases to {self.releases_path}")

    def save_metadata(self, metadata: RunMetadata):
        """Persist run metadata."""
        self._write_json(self.metadata_path, metadata.to_dict())
        logger.info(f"Metadata saved to {self.metadata_path}")
