"""Run orchestration: batches, merge, persistence and publishing."""

import logging
from datetime import date
from typing import List, Optional

from .catalog import SpotifyCatalog, TokenProvider
from .config import BATCH_SIZE, BATCHES_PER_RUN
from .filters import Deduplicator
from .models import Artist, HarvestSummary, Release, RunMetadata
from .output import GitPublisher
from .state import StateManager, batch_count, next_batch

logger = logging.getLogger(__name__)


class Harvester:
    """
    Process the next slice of the artist list and persist the results.

    Each run handles up to ``batches_per_run`` batches starting at the
    persisted cursor. When the cursor points past the end of the list the
    cycle is complete: the cursor goes back to 0, the completion date is
    stamped and the run stops early.
    """

    def __init__(
        self,
        state_manager: StateManager,
        catalog: SpotifyCatalog,
        token_provider: TokenProvider,
        client_id: str,
        client_secret: str,
        publisher: Optional[GitPublisher] = None,
        deduplicator: Optional[Deduplicator] = None,
        batch_size: int = BATCH_SIZE,
        batches_per_run: int = BATCHES_PER_RUN,
    ):
        self.state_manager = state_manager
        self.catalog = catalog
        self.token_provider = token_provider
        self.client_id = client_id
        self.client_secret = client_secret
        self.publisher = publisher
        self.deduplicator = deduplicator or Deduplicator()
        self.batch_size = batch_size
        self.batches_per_run = batches_per_run

    def run(self, today: Optional[date] = None) -> HarvestSummary:
        today = today or date.today()
        summary = HarvestSummary()

        # ========================================
        # Phase 1: Load state
        # ========================================
        logger.info("Phase 1: Loading state...")
        artists = self.state_manager.load_artists()
        prior_releases = self.state_manager.load_releases()
        metadata = self.state_manager.load_metadata()

        # ========================================
        # Phase 2: Authenticate
        # ========================================
        logger.info("Phase 2: Authenticating...")
        token = self.token_provider.obtain_token(self.client_id, self.client_secret)

        # ========================================
        # Phase 3: Fetch batches
        # ========================================
        logger.info("Phase 3: Fetching batches...")
        fetched = self._run_batches(artists, metadata, token, today, summary)

        # ========================================
        # Phase 4: Merge and deduplicate
        # ========================================
        logger.info("Phase 4: Merging releases...")
        releases = self.deduplicator.merge(prior_releases, fetched)
        summary.releases_fetched = len(fetched)
        summary.total_releases = len(releases)

        # ========================================
        # Phase 5: Persist
        # ========================================
        logger.info("Phase 5: Saving state...")
        metadata.last_run = today.isoformat()
        metadata.artists_checked_this_run = summary.artists_processed
        self.state_manager.save_releases(releases)
        self.state_manager.save_metadata(metadata)

        # ========================================
        # Phase 6: Publish
        # ========================================
        if self.publisher is not None:
            logger.info("Phase 6: Publishing...")
            summary.published = self.publisher.publish(
                self.state_manager.output_files(), today=today
            )
        else:
            logger.info("Phase 6: Publishing disabled, skipping")

        logger.info(f"Run complete. Total albums: {summary.total_releases}")
        logger.info(f"Artists processed this run: {summary.artists_processed}")
        if summary.failed_artists:
            logger.warning(
                f"{len(summary.failed_artists)} artists failed: {summary.failed_artists}"
            )

        return summary

    def _run_batches(
        self,
        artists: List[Artist],
        metadata: RunMetadata,
        token: str,
        today: date,
        summary: HarvestSummary,
    ) -> List[Release]:
        """Advance the cursor through up to ``batches_per_run`` batches."""
        fetched: List[Release] = []
        total_batches = batch_count(len(artists), self.batch_size)

        for _ in range(self.batches_per_run):
            batch, exhausted = next_batch(
                artists, metadata.last_batch_index, self.batch_size
            )

            if exhausted:
                logger.info("All batches completed. Starting new full cycle.")
                metadata.last_batch_index = 0
                metadata.last_full_cycle_completed = today.isoformat()
                summary.cycle_completed = True
                break

            logger.info(
                f"Processing batch {metadata.last_batch_index + 1} of {total_batches}, "
                f"{len(batch)} artists"
            )

            for artist in batch:
                outcome = self.catalog.fetch_outcome(artist, token)
                if outcome.ok:
                    fetched.extend(outcome.releases)
                else:
                    summary.failed_artists.append(artist.name)

            summary.artists_processed += len(batch)
            summary.batches_processed += 1
            metadata.last_batch_index += 1

        return fetched
