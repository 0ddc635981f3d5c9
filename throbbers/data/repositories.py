from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Any, Dict, List

from throbbers.core import VoteRecord, log_warning

from .kv_store import KeyValueStore, snapshot_keys

ACCESS_TOKEN_PATH = "spotifyAccessToken"
REFRESH_TOKEN_PATH = "spotifyRefreshToken"
ARTIST_ORDER_PATH = "artistOrder"
ARTIST_NAMES_PATH = "artistNames"
VOTES_PATH = "votes"
HOST_PATH = "host"
GUESTS_PATH = "guests"
CONNECTION_TEST_PATH = "connectionTest"


class TokenRepository:
    """Stores the last Spotify tokens obtained through /callback."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def save_tokens(self, access_token: str, refresh_token: str) -> None:
        self._store.set(ACCESS_TOKEN_PATH, access_token)
        self._store.set(REFRESH_TOKEN_PATH, refresh_token)


class ArtistRepository:
    """Artist display order and the safeKey -> display name map."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def load_order(self) -> List[Any]:
        """
        Return the stored order, or [] when none exists yet.

        Entries are safe keys, or {"safe": ..., "original": ...} objects in
        orders written by older frontends.
        """
        order = self._store.get(ARTIST_ORDER_PATH)
        if not isinstance(order, list):
            return []
        return [entry for entry in order if entry is not None]

    def save_order_if_absent(self, order: List[str]) -> List[Any]:
        """
        Persist `order` unless one is already stored; return the stored order.

        A stored value that is not a list cannot be an order and is replaced.
        """
        stored = self._store.set_if_absent(ARTIST_ORDER_PATH, order)
        if not isinstance(stored, list):
            log_warning(
                f"Stored {ARTIST_ORDER_PATH} is a {type(stored).__name__}, "
                "not a list; replacing it."
            )
            self._store.set(ARTIST_ORDER_PATH, order)
            return list(order)
        return stored

    def load_names(self) -> Dict[str, str]:
        names = self._store.get(ARTIST_NAMES_PATH)
        if not isinstance(names, dict):
            return {}
        return {str(k): str(v) for k, v in names.items() if v is not None}

    def save_names(self, names: Dict[str, str]) -> None:
        self._store.set(ARTIST_NAMES_PATH, names)


class VoteRepository:
    """Latest VoteRecord per artist; every save fully replaces the previous one."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def save(self, safe_artist: str, record: VoteRecord) -> None:
        self._store.set(f"{VOTES_PATH}/{safe_artist}", record.to_store())


class ParticipantRepository:
    """Read-only view over the host and guest participant lists."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def load_roster(self) -> List[str]:
        """
        Union of host and guest identifiers, deduplicated and sorted.

        Both lists are read concurrently.
        """
        with ThreadPoolExecutor(max_workers=2) as executor:
            guests_future = executor.submit(self._store.get, GUESTS_PATH)
            host_future = executor.submit(self._store.get, HOST_PATH)
            guests = guests_future.result()
            host = host_future.result()

        participants = set(snapshot_keys(guests)) | set(snapshot_keys(host))
        return sorted(participants)


class ConnectionCheckRepository:
    def __init__(self, store: KeyValueStore):
        self._store = store

    def write_check(self) -> str:
        """Write a timestamped check value and return the timestamp written."""
        timestamp = datetime.now(timezone.utc).isoformat()
        self._store.set(
            CONNECTION_TEST_PATH,
            {"message": "Hello from the relay", "timestamp": timestamp},
        )
        return timestamp
