from typing import Any, Dict, List, Optional


class ConfigError(Exception):
    """Raised when required process configuration is missing or malformed."""

    def __init__(self, message: str, missing: Optional[List[str]] = None):
        super().__init__(message)
        self.missing = list(missing or [])


class RelayError(Exception):
    """
    Base class for errors surfaced to HTTP clients.

    - status_code : HTTP status the API layer responds with
    - message     : human-readable message, safe to show to the caller
    """

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingParameter(RelayError):
    status_code = 400


class InvalidPayload(RelayError):
    status_code = 400


class UpstreamAuthError(RelayError):
    """The OAuth provider rejected the grant; its error body is passed through."""

    status_code = 400

    def __init__(self, message: str, payload: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.payload = dict(payload or {})


class UpstreamReadFailure(RelayError):
    status_code = 500


class UpstreamWriteFailure(RelayError):
    status_code = 500


class NotFound(RelayError):
    status_code = 404


class HostNotFound(NotFound):
    pass


class NoArtistData(RelayError):
    status_code = 500
