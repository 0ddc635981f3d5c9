"""Public façade for the throbbers.core package.

This module exposes logging helpers, error types, key sanitisation and base
models that are safe to import from other packages. Callers should import
these cross-cutting concerns from this façade instead of the internal
submodules.
"""

from .errors import (
    ConfigError,
    HostNotFound,
    InvalidPayload,
    MissingParameter,
    NoArtistData,
    NotFound,
    RelayError,
    UpstreamAuthError,
    UpstreamReadFailure,
    UpstreamWriteFailure,
)
from .keys import safe_key
from .logging_config import configure_logging
from .logging_utils import (
    log_error,
    log_info,
    log_step,
    log_success,
    log_warning,
)
from .models import NO, YES, ArtistRecord, ExtraTrack, TrackLink, VoteRecord

__all__ = [
    "configure_logging",
    "log_info",
    "log_step",
    "log_success",
    "log_warning",
    "log_error",
    "safe_key",
    "ConfigError",
    "RelayError",
    "MissingParameter",
    "InvalidPayload",
    "UpstreamAuthError",
    "UpstreamReadFailure",
    "UpstreamWriteFailure",
    "NotFound",
    "HostNotFound",
    "NoArtistData",
    "ArtistRecord",
    "TrackLink",
    "VoteRecord",
    "ExtraTrack",
    "YES",
    "NO",
]
