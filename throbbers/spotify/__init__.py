"""Public façade for the throbbers.spotify package.

Exposes the OAuth token client used by the /callback and /refresh routes.
"""

from .auth import SpotifyAuthError, SpotifyTokenClient

__all__ = [
    "SpotifyAuthError",
    "SpotifyTokenClient",
]
