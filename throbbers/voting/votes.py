from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from throbbers.core import NO, InvalidPayload, VoteRecord, log_success
from throbbers.data import ArtistRepository, ParticipantRepository, VoteRepository

from .ledger import VoteLedger
from .resolver import build_resolver


def iso_timestamp(now: Optional[datetime] = None) -> str:
    """UTC ISO-8601 with millisecond precision and a 'Z' suffix."""
    moment = now or datetime.now(timezone.utc)
    return (
        moment.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def fill_missing_votes(votes: Mapping[str, Any], roster: List[str]) -> Dict[str, str]:
    """
    Give every roster participant a vote, defaulting absentees to "no".

    Votes from participants outside the roster are kept as submitted.
    """
    filled = {str(k): str(v) for k, v in votes.items() if v is not None}
    for participant in roster:
        if not filled.get(participant):
            filled[participant] = NO
    return filled


def validate_vote_payload(artist: Any, votes: Any) -> None:
    if not artist or not isinstance(artist, str) or not isinstance(votes, Mapping):
        raise InvalidPayload("Invalid payload")


class VoteRecorder:
    """
    Records one artist's votes: latest state in the key-value store, one
    audit row in the ledger sheet.

    Steps are not transactional. A failure after the key-value write (or
    after the header update) leaves the earlier writes in place.
    """

    def __init__(
        self,
        artists: ArtistRepository,
        participants: ParticipantRepository,
        votes: VoteRepository,
        ledger: VoteLedger,
    ):
        self._artists = artists
        self._participants = participants
        self._votes = votes
        self._ledger = ledger

    def record(
        self, artist: Any, votes: Any, now: Optional[datetime] = None
    ) -> VoteRecord:
        validate_vote_payload(artist, votes)
        timestamp = iso_timestamp(now)

        order = self._artists.load_order()
        original_name = build_resolver(order, self._artists).resolve(artist)

        roster = self._participants.load_roster()
        filled = fill_missing_votes(votes, roster)

        record = VoteRecord(
            original_name=original_name, votes=filled, timestamp=timestamp
        )
        self._votes.save(artist, record)

        self._ledger.ensure_header(roster)
        row = [timestamp, original_name, *[filled[p] for p in roster]]
        self._ledger.append_row(row)

        log_success(f"Vote recorded: {row}")
        return record
