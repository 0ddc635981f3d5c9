import random

import pytest

from throbbers.config import ARTIST_ROSTER_RANGE, EXTRA_TRACKS_RANGE
from throbbers.core import NoArtistData
from throbbers.data import ArtistRepository
from throbbers.voting import get_artist_info, load_artist_roster, load_extra_tracks

ROSTER = [
    ["ARTIST", "TRACK", "LINK"],
    ["AC/DC", "Thunderstruck", "https://open.spotify.com/track/1"],
    ["AC/DC", "Back in Black", "https://open.spotify.com/track/2"],
    ["  Björk ", "Hyperballad"],
    [""],
    ["Mr. Big"],
]


def test_load_artist_roster_groups_tracks_in_first_seen_order(sheet) -> None:
    sheet.ranges[ARTIST_ROSTER_RANGE] = ROSTER

    roster = load_artist_roster(sheet)

    assert [r.safe_key for r in roster] == ["AC_DC", "Björk", "Mr_ Big"]
    assert [r.display_name for r in roster] == ["AC/DC", "Björk", "Mr. Big"]
    assert [t.name for t in roster[0].tracks] == ["Thunderstruck", "Back in Black"]
    assert roster[1].tracks[0].url == ""
    assert roster[2].tracks == []


def test_load_artist_roster_rejects_wrong_header(sheet) -> None:
    sheet.ranges[ARTIST_ROSTER_RANGE] = [["NAME"], ["AC/DC"]]

    with pytest.raises(NoArtistData, match="Expected header 'ARTIST'"):
        load_artist_roster(sheet)


def test_load_artist_roster_rejects_empty_sheet(sheet) -> None:
    sheet.ranges[ARTIST_ROSTER_RANGE] = [["ARTIST"]]

    with pytest.raises(NoArtistData):
        load_artist_roster(sheet)


def test_artist_info_generates_order_once(sheet, store) -> None:
    sheet.ranges[ARTIST_ROSTER_RANGE] = ROSTER
    artists = ArtistRepository(store)

    first = get_artist_info(sheet, artists, rng=random.Random(7))
    second = get_artist_info(sheet, artists, rng=random.Random(99))

    assert sorted(first["order"]) == ["AC_DC", "Björk", "Mr_ Big"]
    assert second["order"] == first["order"]
    assert store.data["artistOrder"] == first["order"]
    assert store.data["artistNames"] == {
        "AC_DC": "AC/DC",
        "Björk": "Björk",
        "Mr_ Big": "Mr. Big",
    }
    assert store.writes.count("artistOrder") == 1
    assert first["tracks"]["AC_DC"][1] == {
        "name": "Back in Black",
        "url": "https://open.spotify.com/track/2",
    }


def test_artist_info_keeps_existing_order_unchanged(sheet, store) -> None:
    sheet.ranges[ARTIST_ROSTER_RANGE] = ROSTER
    existing = ["Mr_ Big", {"safe": "AC_DC", "original": "AC/DC"}]
    store.set("artistOrder", existing)

    info = get_artist_info(sheet, ArtistRepository(store))

    assert info["order"] == existing
    assert "artistNames" not in store.data


def test_artist_info_replaces_order_that_is_not_a_list(sheet, store) -> None:
    sheet.ranges[ARTIST_ROSTER_RANGE] = ROSTER
    store.set("artistOrder", {"AC_DC": 0})
    artists = ArtistRepository(store)

    first = get_artist_info(sheet, artists, rng=random.Random(7))
    second = get_artist_info(sheet, artists, rng=random.Random(99))

    assert sorted(first["order"]) == ["AC_DC", "Björk", "Mr_ Big"]
    assert store.data["artistOrder"] == first["order"]
    assert second["order"] == first["order"]
    assert "artistNames" in store.data


def test_extra_tracks_drops_incomplete_rows_and_keeps_order(sheet) -> None:
    sheet.ranges[EXTRA_TRACKS_RANGE] = [
        ["Air", "La Femme d'Argent", "https://open.spotify.com/track/a"],
        ["Blur", "", "https://open.spotify.com/track/b"],
        ["Cure", "Lovesong"],
        ["", "Nameless", "https://open.spotify.com/track/c"],
        ["Daft Punk", "Veridis Quo", "https://open.spotify.com/track/d"],
    ]

    extras = load_extra_tracks(sheet)

    assert [(e.artist, e.track) for e in extras] == [
        ("Air", "La Femme d'Argent"),
        ("Daft Punk", "Veridis Quo"),
    ]
    assert extras[1].spotify_url == "https://open.spotify.com/track/d"
