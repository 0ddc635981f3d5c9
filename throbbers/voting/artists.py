import random
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from throbbers.config import (
    ARTIST_ROSTER_HEADER,
    ARTIST_ROSTER_RANGE,
    EXTRA_TRACKS_RANGE,
)
from throbbers.core import (
    ArtistRecord,
    ExtraTrack,
    NoArtistData,
    TrackLink,
    log_info,
    log_success,
    safe_key,
)
from throbbers.data import ArtistRepository, Spreadsheet


def _cell(row: List[Any], index: int) -> str:
    if index >= len(row) or row[index] is None:
        return ""
    return str(row[index]).strip()


def load_artist_roster(sheet: Spreadsheet) -> List[ArtistRecord]:
    """
    Read the ARTIST / TRACK / LINK roster and group it per artist.

    - an artist may span several rows (one per track)
    - artists keep the order in which they first appear
    - names that sanitize to the same key are merged under the first name seen
    """
    rows = sheet.get_values(ARTIST_ROSTER_RANGE)
    if not rows or len(rows) < 2:
        raise NoArtistData(f"No artist data found in {ARTIST_ROSTER_RANGE}")

    header = _cell(rows[0], 0)
    if header != ARTIST_ROSTER_HEADER:
        raise NoArtistData(
            f"Expected header '{ARTIST_ROSTER_HEADER}' in {ARTIST_ROSTER_RANGE} "
            f"but found '{header}'"
        )

    records: Dict[str, ArtistRecord] = {}
    for row in rows[1:]:
        name = _cell(row, 0)
        if not name:
            continue
        key = safe_key(name)
        record = records.get(key)
        if record is None:
            record = ArtistRecord(safe_key=key, display_name=name)
            records[key] = record

        track = _cell(row, 1)
        if track:
            record.tracks.append(TrackLink(name=track, url=_cell(row, 2)))

    if not records:
        raise NoArtistData(f"No artist data found in {ARTIST_ROSTER_RANGE}")

    return list(records.values())


def shuffled_order(keys: List[str], rng: Optional[random.Random] = None) -> List[str]:
    """Uniformly random permutation of `keys`; the input list is left untouched."""
    order = list(keys)
    (rng or random).shuffle(order)
    return order


def get_artist_info(
    sheet: Spreadsheet,
    artists: ArtistRepository,
    rng: Optional[random.Random] = None,
) -> Dict[str, Any]:
    """
    Return {"order", "names", "tracks"} for the voting frontend.

    The display order is generated once: when no order is stored yet a random
    one is persisted together with the name map, otherwise the stored order
    is returned as is, whatever the sheet now contains.
    """
    roster = load_artist_roster(sheet)
    names = {r.safe_key: r.display_name for r in roster}
    tracks = {r.safe_key: [asdict(t) for t in r.tracks] for r in roster}

    order = artists.load_order()
    if not order:
        candidate = shuffled_order([r.safe_key for r in roster], rng)
        order = artists.save_order_if_absent(candidate)
        if order == candidate:
            artists.save_names(names)
            log_success(f"Stored new artist order ({len(order)} artists)")
        else:
            log_info("Artist order was stored concurrently; keeping it.")

    return {"order": order, "names": names, "tracks": tracks}


def load_extra_tracks(sheet: Spreadsheet) -> List[ExtraTrack]:
    """Rows carrying artist, track and link; incomplete rows are dropped."""
    rows = sheet.get_values(EXTRA_TRACKS_RANGE)
    extras: List[ExtraTrack] = []
    for row in rows:
        artist, track, url = _cell(row, 0), _cell(row, 1), _cell(row, 2)
        if not (artist and track and url):
            continue
        extras.append(ExtraTrack(artist=artist, track=track, spotify_url=url))
    return extras
