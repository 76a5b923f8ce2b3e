"""Client-credentials token exchange."""

from typing import Optional

import requests

from ..config import TOKEN_URL
from .base import BaseClient, CatalogError


class AuthError(CatalogError):
    """Raised when the token endpoint fails or returns no token."""

    pass


class TokenProvider(BaseClient):
    """Exchange client credentials for a short-lived bearer token."""

    def __init__(
        self,
        token_url: str = TOKEN_URL,
        session: Optional[requests.Session] = None,
        **kwargs,
    ):
        super().__init__(session=session, **kwargs)
        self.token_url = token_url

    def obtain_token(self, client_id: str, client_secret: str) -> str:
        """POST the credentials with basic auth and return ``access_token``."""
        try:
            response = self.session.post(
                self.token_url,
                data={"grant_type": "client_credentials"},
                auth=(client_id, client_secret),
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise AuthError(f"Token request failed: {e}") from e
        except ValueError as e:
            raise AuthError(f"Token response was not JSON: {e}") from e

        token = data.get("access_token") if isinstance(data, dict) else None
        if not token:
            raise AuthError("Token response did not contain an access_token")

        self.logger.info("Obtained Spotify access token")
        return token
