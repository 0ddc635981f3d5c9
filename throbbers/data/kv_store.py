from abc import ABC, abstractmethod
from typing import Any, Dict

import firebase_admin
from firebase_admin import credentials, db

from throbbers.config import Settings

FIREBASE_APP_NAME = "throbbers"


def is_empty_value(value: Any) -> bool:
    """None, and empty lists/dicts/strings, count as absent."""
    if value is None:
        return True
    if isinstance(value, (list, dict, str)) and len(value) == 0:
        return True
    return False


class KeyValueStore(ABC):
    """
    Hierarchical, path-addressed key-value store.

    Contract:
      - get(path)                -> stored value, or None when nothing is stored
      - set(path, value)         -> unconditional overwrite (last write wins)
      - set_if_absent(path, val) -> writes only when the stored value is absent
                                    or empty; returns the value stored afterwards
                                    (the existing one, or `val`)
    """

    @abstractmethod
    def get(self, path: str) -> Any:
        raise NotImplementedError

    @abstractmethod
    def set(self, path: str, value: Any) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_if_absent(self, path: str, value: Any) -> Any:
        raise NotImplementedError


class FirebaseKeyValueStore(KeyValueStore):
    """
    KeyValueStore backed by the Firebase Realtime Database.

    `set_if_absent` runs as a database transaction, so two concurrent first
    callers agree on a single stored value.
    """

    def __init__(self, app: firebase_admin.App):
        self._app = app

    @classmethod
    def from_settings(cls, settings: Settings) -> "FirebaseKeyValueStore":
        try:
            app = firebase_admin.get_app(FIREBASE_APP_NAME)
        except ValueError:
            app = firebase_admin.initialize_app(
                credentials.Certificate(settings.firebase_service_account),
                {"databaseURL": settings.firebase_db_url},
                name=FIREBASE_APP_NAME,
            )
        return cls(app)

    def _ref(self, path: str) -> db.Reference:
        return db.reference(f"/{path.strip('/')}", app=self._app)

    def get(self, path: str) -> Any:
        return self._ref(path).get()

    def set(self, path: str, value: Any) -> None:
        self._ref(path).set(value)

    def set_if_absent(self, path: str, value: Any) -> Any:
        def _update(current: Any) -> Any:
            if is_empty_value(current):
                return value
            return current

        return self._ref(path).transaction(_update)


def snapshot_keys(value: Any) -> Dict[str, Any]:
    """
    Normalise a stored mapping for key iteration.

    The realtime database hands back lists for objects whose keys look like
    array indices; those are folded back into {index: value} form.
    """
    if isinstance(value, dict):
        return value
    if isinstance(value, list):
        return {str(i): v for i, v in enumerate(value) if v is not None}
    return {}
