"""Base HTTP client with common functionality."""

import logging
import time
from typing import Any, Dict, Optional

import requests

from ..config import REQUEST_DELAY, REQUEST_TIMEOUT, USER_AGENT


class CatalogError(Exception):
    """Base exception for catalog API errors."""

    pass


class BaseClient:
    """Shared session handling for the Spotify endpoints."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = REQUEST_TIMEOUT,
        request_delay: float = REQUEST_DELAY,
    ):
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})
        self.timeout = timeout
        self.request_delay = request_delay
        self.logger = logging.getLogger(self.__class__.__name__)
        self._last_request_time = 0.0

    def _rate_limit(self):
        """Apply a minimum delay between requests."""
        if self.request_delay <= 0:
            return
        elapsed = time.time() - self._last_request_time
        if elapsed < self.request_delay:
            time.sleep(self.request_delay - elapsed)
        self._last_request_time = time.time()

    def _get_json(
        self,
        url: str,
        token: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """GET a URL with a bearer token and decode the JSON body.

        Raises requests.HTTPError on a non-2xx status and ValueError when the
        body is not JSON.
        """
        self._rate_limit()
        self.logger.debug(f"Fetching: {url}")
        response = self.session.get(
            url,
            headers={"Authorization": f"Bearer {token}"},
            params=params,
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()
