"""Public façade for the throbbers.voting package.

Exposes the artist-info and vote-recording workflows, the ledger queries and
the name resolver. Callers should import these from this façade instead of
the internal modules.
"""

from .artists import (
    get_artist_info,
    load_artist_roster,
    load_extra_tracks,
    shuffled_order,
)
from .ledger import VoteLedger, ledger_header
from .resolver import (
    NameLookup,
    NameMapLookup,
    NameResolver,
    OrderEntryLookup,
    build_resolver,
)
from .votes import (
    VoteRecorder,
    fill_missing_votes,
    iso_timestamp,
    validate_vote_payload,
)

__all__ = [
    "get_artist_info",
    "load_artist_roster",
    "load_extra_tracks",
    "shuffled_order",
    "VoteLedger",
    "ledger_header",
    "NameLookup",
    "NameMapLookup",
    "NameResolver",
    "OrderEntryLookup",
    "build_resolver",
    "VoteRecorder",
    "fill_missing_votes",
    "iso_timestamp",
    "validate_vote_payload",
]
