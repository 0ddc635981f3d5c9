from typing import Any, Dict

import requests
from requests.auth import HTTPBasicAuth

from throbbers.config import SPOTIFY_TOKEN_URL, Settings
from throbbers.core import UpstreamAuthError


class SpotifyAuthError(UpstreamAuthError):
    """Spotify's token endpoint answered with an error body."""


class SpotifyTokenClient:
    """
    Authorization-code and refresh-token grants against Spotify's token
    endpoint. Client credentials travel as HTTP Basic auth.
    """

    def __init__(self, settings: Settings, session: requests.Session | None = None):
        self._client_id = settings.spotify_client_id
        self._client_secret = settings.spotify_client_secret
        self._redirect_uri = settings.redirect_uri
        self._session = session or requests.Session()

    def _post(self, token_data: Dict[str, str]) -> Dict[str, Any]:
        r = self._session.post(
            SPOTIFY_TOKEN_URL,
            data=token_data,
            auth=HTTPBasicAuth(self._client_id, self._client_secret),
        )
        try:
            payload = r.json()
        except ValueError:
            # Non-JSON answers are transport problems, not grant errors.
            r.raise_for_status()
            raise
        if not isinstance(payload, dict):
            r.raise_for_status()
            raise ValueError("Unexpected token endpoint response.")
        return payload

    def exchange_code(self, code: str) -> Dict[str, Any]:
        """
        Exchange an authorization code for tokens.

        Raises SpotifyAuthError when Spotify reports an error or omits either
        the access or the refresh token.
        """
        token_info = self._post(
            {
                "grant_type": "authorization_code",
                "code": code,
                "redirect_uri": self._redirect_uri,
            }
        )
        if (
            token_info.get("error")
            or not token_info.get("access_token")
            or not token_info.get("refresh_token")
        ):
            raise SpotifyAuthError("Token exchange rejected.", payload=token_info)
        return token_info

    def refresh(self, refresh_token: str) -> Dict[str, Any]:
        token_info = self._post(
            {
                "grant_type": "refresh_token",
                "refresh_token": refresh_token,
            }
        )
        if token_info.get("error"):
            raise SpotifyAuthError("Token refresh rejected.", payload=token_info)
        return token_info
