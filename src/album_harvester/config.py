"""Configuration for the album harvester."""

import os
from pathlib import Path

# Data files (default: the working directory, which is also the git checkout)
DATA_DIR = os.getenv("HARVEST_DATA_DIR", "")
ARTISTS_FILE = "artists.json"
ALBUMS_FILE = "albums.json"
META_FILE = "meta.json"

# Spotify credentials (client-credentials flow)
SPOTIFY_CLIENT_ID = os.getenv("SPOTIFY_CLIENT_ID", "")
SPOTIFY_CLIENT_SECRET = os.getenv("SPOTIFY_CLIENT_SECRET", "")

# Spotify endpoints
TOKEN_URL = "https://accounts.spotify.com/api/token"
API_BASE_URL = "https://api.spotify.com/v1"
PAGE_SIZE = 50
INCLUDE_GROUPS = ("album", "single")

# Batching
BATCH_SIZE = int(os.getenv("HARVEST_BATCH_SIZE", "1000"))  # artists per batch
BATCHES_PER_RUN = int(os.getenv("HARVEST_BATCHES_PER_RUN", "5"))

# HTTP behaviour (seconds)
REQUEST_TIMEOUT = float(os.getenv("HARVEST_REQUEST_TIMEOUT", "30"))
REQUEST_DELAY = float(os.getenv("HARVEST_REQUEST_DELAY", "0"))

# Publishing
PUBLISH_ENABLED = os.getenv("HARVEST_PUBLISH", "1").lower() in ("1", "true", "yes")
GIT_USER_NAME = os.getenv("HARVEST_GIT_USER_NAME", "")
GIT_USER_EMAIL = os.getenv("HARVEST_GIT_USER_EMAIL", "")

LOG_LEVEL = os.getenv("HARVEST_LOG_LEVEL", "INFO").upper()

# User agent for requests
USER_AGENT = "album-harvester/0.1"


class ConfigurationError(Exception):
    """Raised when required configuration is missing."""

    pass


def require_credentials(client_id: str, client_secret: str) -> None:
    """Fail fast when either Spotify credential is empty."""
    missing = []
    if not client_id:
        missing.append("SPOTIFY_CLIENT_ID")
    if not client_secret:
        missing.append("SPOTIFY_CLIENT_SECRET")
    if missing:
        raise ConfigurationError(f"Missing Spotify secrets: {', '.join(missing)}")


def data_dir() -> Path:
    """Directory holding the artist list and the persisted output files."""
    return Path(DATA_DIR) if DATA_DIR else Path.cwd()
