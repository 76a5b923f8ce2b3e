"""Run metadata, per-artist outcomes and run summaries."""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional

from .artist import Artist
from .release import Release


@dataclass
class RunMetadata:
    """Checkpoint persisted between runs.

    ``last_batch_index`` is the cursor: the index of the next batch of the
    artist list due for processing. Dates are ISO ``YYYY-MM-DD`` strings.
    """

    last_run: Optional[str] = None
    last_full_cycle_completed: Optional[str] = None
    artists_checked_this_run: int = 0
    last_batch_index: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RunMetadata":
        """Overlay persisted values on the defaults, ignoring unknown keys.

        Counters are coerced to ``int``; a value that does not convert raises
        ValueError or TypeError.
        """
        known = {f.name for f in fields(cls)}
        metadata = cls(**{k: v for k, v in data.items() if k in known})
        metadata.artists_checked_this_run = int(metadata.artists_checked_this_run)
        metadata.last_batch_index = int(metadata.last_batch_index)
        if metadata.last_batch_index < 0:
            metadata.last_batch_index = 0
        return metadata

    def to_dict(self) -> Dict[str, Any]:
        return {
            "last_run": self.last_run,
            "last_full_cycle_completed": self.last_full_cycle_completed,
            "artists_checked_this_run": self.artists_checked_this_run,
            "last_batch_index": self.last_batch_index,
        }


@dataclass
class FetchOutcome:
    """Result of fetching one artist: releases on success, a reason on failure."""

    artist: Artist
    releases: List[Release] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, artist: Artist, reason: str) -> "FetchOutcome":
        return cls(artist=artist, releases=[], error=reason)


@dataclass
class HarvestSummary:
    """What a single run did."""

    artists_processed: int = 0
    batches_processed: int = 0
    cycle_completed: bool = False
    failed_artists: List[str] = field(default_factory=list)
    releases_fetched: int = 0
    total_releases: int = 0
    published: Optional[bool] = None  # None when publishing was skipped
