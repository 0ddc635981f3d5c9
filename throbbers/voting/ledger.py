from typing import Any, List

from throbbers.config import (
    LEDGER_APPEND_ANCHOR,
    LEDGER_HEADER_ANCHOR,
    LEDGER_HEADER_RANGE,
    LEDGER_RANGE,
)
from throbbers.core import YES, HostNotFound, log_step
from throbbers.data import RAW, USER_ENTERED, Spreadsheet

TIMESTAMP_COLUMN = "TIMESTAMP"
ARTIST_COLUMN = "ARTIST"


def ledger_header(roster: List[str]) -> List[str]:
    return [TIMESTAMP_COLUMN, ARTIST_COLUMN, *roster]


class VoteLedger:
    """
    Append-only audit log of vote submissions on the VOTES tab.

    Row 1 holds [TIMESTAMP, ARTIST, participant...]; every submission adds
    one row below it.
    """

    def __init__(self, sheet: Spreadsheet):
        self._sheet = sheet

    def ensure_header(self, roster: List[str]) -> bool:
        """
        Write the header row when it is missing or differs from the roster.

        A shorter header is padded with blanks up to the current width, since
        a values update only overwrites the cells it is given.

        Returns True when the header was (re)written.
        """
        expected = ledger_header(roster)
        rows = self._sheet.get_values(LEDGER_HEADER_RANGE)
        current = [str(c).strip() for c in rows[0]] if rows else []
        while current and not current[-1]:
            current.pop()
        if current == expected:
            return False

        log_step(f"Updating ledger header ({len(roster)} participants)")
        padded = expected + [""] * (len(current) - len(expected))
        self._sheet.update_values(LEDGER_HEADER_ANCHOR, [padded], RAW)
        return True

    def append_row(self, row: List[Any]) -> None:
        self._sheet.append_values(LEDGER_APPEND_ANCHOR, [row], USER_ENTERED)

    def clear(self) -> None:
        self._sheet.clear_values(LEDGER_RANGE)

    def count_yes(self, participant: str) -> int:
        """
        Count "yes" votes (any case) in the participant's column.

        Raises HostNotFound when no header cell names the participant.
        """
        rows = self._sheet.get_values(LEDGER_RANGE)
        header = rows[0] if rows else []
        wanted = participant.strip().lower()

        column = None
        # Participant columns start after TIMESTAMP and ARTIST.
        for index, cell in enumerate(header[2:], start=2):
            if str(cell).strip().lower() == wanted:
                column = index
                break
        if column is None:
            raise HostNotFound(f"Host '{participant}' not found in sheet")

        count = 0
        for row in rows[1:]:
            if column < len(row) and str(row[column]).strip().lower() == YES:
                count += 1
        return count
