"""Public façade for the throbbers.data package.

This module exposes the key-value store and spreadsheet clients plus the
repositories built on top of the key-value namespace. Callers should use this
façade instead of importing from the internal modules directly.
"""

from .kv_store import FirebaseKeyValueStore, KeyValueStore, is_empty_value
from .repositories import (
    ArtistRepository,
    ConnectionCheckRepository,
    ParticipantRepository,
    TokenRepository,
    VoteRepository,
)
from .spreadsheet import RAW, USER_ENTERED, GspreadSpreadsheet, Spreadsheet

__all__ = [
    "KeyValueStore",
    "FirebaseKeyValueStore",
    "is_empty_value",
    "Spreadsheet",
    "GspreadSpreadsheet",
    "RAW",
    "USER_ENTERED",
    "TokenRepository",
    "ArtistRepository",
    "VoteRepository",
    "ParticipantRepository",
    "ConnectionCheckRepository",
]
