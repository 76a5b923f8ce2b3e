from .artist import Artist
from .release import Release
from .run import FetchOutcome, HarvestSummary, RunMetadata

__all__ = [
    "Artist",
    "FetchOutcome",
    "HarvestSummary",
    "Release",
    "RunMetadata",
]
