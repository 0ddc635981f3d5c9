from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import gspread

from throbbers.config import SHEETS_SCOPES

RAW = "RAW"
USER_ENTERED = "USER_ENTERED"

Rows = List[List[Any]]


class Spreadsheet(ABC):
    """
    A1-range access to one spreadsheet.

    Rows are lists of cell values; columns are 0-indexed within the range.
    Trailing empty cells and rows may be omitted by the backend.
    """

    @abstractmethod
    def get_values(self, range_name: str) -> Rows:
        raise NotImplementedError

    @abstractmethod
    def update_values(
        self, range_name: str, rows: Rows, input_option: str = RAW
    ) -> None:
        raise NotImplementedError

    @abstractmethod
    def append_values(
        self, range_name: str, rows: Rows, input_option: str = USER_ENTERED
    ) -> None:
        raise NotImplementedError

    @abstractmethod
    def clear_values(self, range_name: str) -> None:
        raise NotImplementedError


class GspreadSpreadsheet(Spreadsheet):
    """Spreadsheet backed by the Google Sheets values API through gspread."""

    def __init__(self, client: gspread.Client, spreadsheet_id: str):
        self._client = client
        self._spreadsheet_id = spreadsheet_id
        self._sheet: Optional[gspread.Spreadsheet] = None

    @classmethod
    def from_service_account(
        cls, service_account: Dict[str, Any], spreadsheet_id: str
    ) -> "GspreadSpreadsheet":
        client = gspread.service_account_from_dict(
            service_account, scopes=SHEETS_SCOPES
        )
        return cls(client, spreadsheet_id)

    def _spreadsheet(self) -> gspread.Spreadsheet:
        # Opened on first use so that startup never blocks on the Sheets API.
        if self._sheet is None:
            self._sheet = self._client.open_by_key(self._spreadsheet_id)
        return self._sheet

    def get_values(self, range_name: str) -> Rows:
        response = self._spreadsheet().values_get(range_name)
        return response.get("values", []) or []

    def update_values(
        self, range_name: str, rows: Rows, input_option: str = RAW
    ) -> None:
        self._spreadsheet().values_update(
            range_name,
            params={"valueInputOption": input_option},
            body={"values": rows},
        )

    def append_values(
        self, range_name: str, rows: Rows, input_option: str = USER_ENTERED
    ) -> None:
        self._spreadsheet().values_append(
            range_name,
            params={
                "valueInputOption": input_option,
                "insertDataOption": "INSERT_ROWS",
            },
            body={"values": rows},
        )

    def clear_values(self, range_name: str) -> None:
        self._spreadsheet().values_clear(range_name)
