import copy
from typing import Any, Dict, List, Set

import pytest
from fastapi.testclient import TestClient

from throbbers.api.deps import Services
from throbbers.api.fastapi_app import create_app
from throbbers.config import (
    LEDGER_APPEND_ANCHOR,
    LEDGER_HEADER_ANCHOR,
    LEDGER_HEADER_RANGE,
    LEDGER_RANGE,
    Settings,
)
from throbbers.data import KeyValueStore, Spreadsheet, is_empty_value


class InMemoryKeyValueStore(KeyValueStore):
    def __init__(self, initial: Dict[str, Any] | None = None):
        self.data: Dict[str, Any] = dict(initial or {})
        self.writes: List[str] = []

    def get(self, path: str) -> Any:
        return copy.deepcopy(self.data.get(path))

    def set(self, path: str, value: Any) -> None:
        self.writes.append(path)
        self.data[path] = copy.deepcopy(value)

    def set_if_absent(self, path: str, value: Any) -> Any:
        if is_empty_value(self.data.get(path)):
            self.set(path, value)
        return copy.deepcopy(self.data[path])


def _trim(row: List[Any]) -> List[Any]:
    """Drop trailing blank cells, as the Sheets values API does."""
    trimmed = list(row)
    while trimmed and trimmed[-1] in ("", None):
        trimmed.pop()
    return trimmed


class FakeSpreadsheet(Spreadsheet):
    """
    Ranges are served from `ranges`; the VOTES tab is modelled as a list of
    rows so header updates, appends and clears interact like the real sheet.
    """

    def __init__(self, ranges: Dict[str, List[List[Any]]] | None = None):
        self.ranges: Dict[str, List[List[Any]]] = dict(ranges or {})
        self.votes: List[List[Any]] = []
        self.calls: List[tuple] = []
        self.fail_on: Set[str] = set()

    def _maybe_fail(self, method: str) -> None:
        if method in self.fail_on:
            raise RuntimeError(f"{method} failed")

    def get_values(self, range_name: str) -> List[List[Any]]:
        self.calls.append(("get", range_name))
        self._maybe_fail("get")
        if range_name == LEDGER_HEADER_RANGE:
            return [_trim(r) for r in self.votes[:1]]
        if range_name == LEDGER_RANGE:
            return [_trim(r) for r in self.votes]
        return copy.deepcopy(self.ranges.get(range_name, []))

    def update_values(self, range_name, rows, input_option="RAW") -> None:
        # Cell-level write: cells beyond the given row keep their old value.
        self.calls.append(("update", range_name, input_option))
        self._maybe_fail("update")
        assert range_name == LEDGER_HEADER_ANCHOR
        if not self.votes:
            self.votes.append([])
        header = self.votes[0]
        for index, value in enumerate(rows[0]):
            if index < len(header):
                header[index] = value
            else:
                header.append(value)

    def append_values(self, range_name, rows, input_option="USER_ENTERED") -> None:
        self.calls.append(("append", range_name, input_option))
        self._maybe_fail("append")
        assert range_name == LEDGER_APPEND_ANCHOR
        self.votes.extend(list(r) for r in rows)

    def clear_values(self, range_name: str) -> None:
        self.calls.append(("clear", range_name))
        self._maybe_fail("clear")
        assert range_name == LEDGER_RANGE
        self.votes = []


class StubTokenClient:
    def __init__(self):
        self.exchange_result: Any = {
            "access_token": "access-123",
            "refresh_token": "refresh-456",
        }
        self.refresh_result: Any = {"access_token": "access-new", "expires_in": 3600}

    def exchange_code(self, code: str) -> Dict[str, Any]:
        if isinstance(self.exchange_result, Exception):
            raise self.exchange_result
        return self.exchange_result

    def refresh(self, refresh_token: str) -> Dict[str, Any]:
        if isinstance(self.refresh_result, Exception):
            raise self.refresh_result
        return self.refresh_result


@pytest.fixture
def settings() -> Settings:
    return Settings(
        spotify_client_id="client-id",
        spotify_client_secret="client-secret",
        redirect_uri="https://relay.example.com/callback",
        frontend_uri="https://frontend.example.com/",
        spreadsheet_id="sheet-id",
        extra_tracks_spreadsheet_id="sheet-id",
        firebase_service_account={"type": "service_account"},
        firebase_db_url="https://example.firebaseio.com",
        google_service_account={"type": "service_account"},
        cors_origins=["https://frontend.example.com"],
    )


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def sheet() -> FakeSpreadsheet:
    return FakeSpreadsheet()


@pytest.fixture
def token_client() -> StubTokenClient:
    return StubTokenClient()


@pytest.fixture
def client(settings, store, sheet, token_client) -> TestClient:
    services = Services(
        settings=settings,
        store=store,
        sheet=sheet,
        extra_tracks_sheet=sheet,
        token_client=token_client,
    )
    return TestClient(create_app(settings, services))
