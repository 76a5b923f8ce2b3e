"""Deduplication and merging of the release collection."""

import logging
from typing import Dict, List

from ..models import Release

logger = logging.getLogger(__name__)


class Deduplicator:
    """Keep one record per release id across repeated partial runs."""

    def merge(self, prior: List[Release], fetched: List[Release]) -> List[Release]:
        """
        Combine the persisted collection with this run's releases.

        Args:
            prior: Releases loaded from disk
            fetched: Releases fetched during this run

        Returns:
            Deduplicated list where fetched entries win over prior ones
        """
        return self.deduplicate(prior + fetched)

    def deduplicate(self, releases: List[Release]) -> List[Release]:
        """
        Remove duplicate ids, last write wins.

        A release keeps the position where its id first appeared, but carries
        the fields of the last entry with that id.
        """
        by_id: Dict[str, Release] = {}
        for release in releases:
            by_id[release.id] = release

        unique = list(by_id.values())
        logger.info(
            f"Deduplication: {len(releases)} releases -> {len(unique)} unique"
        )
        return unique
