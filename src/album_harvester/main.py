"""Entry point for the album harvester."""

import logging
import sys

from . import config
from .catalog import SpotifyCatalog, TokenProvider
from .config import ConfigurationError, require_credentials
from .models import HarvestSummary
from .orchestrator import Harvester
from .output import GitPublisher
from .state import StateManager

logger = logging.getLogger(__name__)


def configure_logging(level: str = config.LOG_LEVEL):
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_harvester() -> Harvester:
    """Wire the components from configuration."""
    data_path = config.data_dir()
    state_manager = StateManager(data_path)

    publisher = None
    if config.PUBLISH_ENABLED:
        publisher = GitPublisher(
            data_path,
            user_name=config.GIT_USER_NAME,
            user_email=config.GIT_USER_EMAIL,
        )

    return Harvester(
        state_manager=state_manager,
        catalog=SpotifyCatalog(),
        token_provider=TokenProvider(),
        client_id=config.SPOTIFY_CLIENT_ID,
        client_secret=config.SPOTIFY_CLIENT_SECRET,
        publisher=publisher,
        batch_size=config.BATCH_SIZE,
        batches_per_run=config.BATCHES_PER_RUN,
    )


def run_harvest() -> HarvestSummary:
    """Run one harvest and log its summary."""
    logger.info("=" * 60)
    logger.info("Starting Album Harvester")
    logger.info("=" * 60)
    logger.info(
        f"Data directory: {config.data_dir()} "
        f"(batch size {config.BATCH_SIZE}, {config.BATCHES_PER_RUN} batches per run)"
    )

    summary = build_harvester().run()

    logger.info("=" * 60)
    logger.info("COMPLETE!")
    logger.info("=" * 60)
    logger.info(f"Batches processed: {summary.batches_processed}")
    logger.info(f"Artists processed: {summary.artists_processed}")
    logger.info(f"Failed artists: {len(summary.failed_artists)}")
    logger.info(f"Releases fetched this run: {summary.releases_fetched}")
    logger.info(f"Total releases: {summary.total_releases}")
    if summary.cycle_completed:
        logger.info("Full cycle completed, next run starts from the first batch")
    if summary.published is False:
        logger.warning("Publishing failed; data files were still updated locally")
    logger.info("=" * 60)

    return summary


def main() -> int:
    """Main orchestration function; returns the process exit status."""
    configure_logging()

    try:
        require_credentials(config.SPOTIFY_CLIENT_ID, config.SPOTIFY_CLIENT_SECRET)
    except ConfigurationError as e:
        logger.error(str(e))
        return 1

    run_harvest()
    return 0


if __name__ == "__main__":
    sys.exit(main())
