"""Shared collaborators, built once per app and injected into routes."""
from dataclasses import dataclass

from fastapi import Request

from throbbers.config import Settings
from throbbers.data import (
    ArtistRepository,
    ConnectionCheckRepository,
    FirebaseKeyValueStore,
    GspreadSpreadsheet,
    KeyValueStore,
    ParticipantRepository,
    Spreadsheet,
    TokenRepository,
    VoteRepository,
)
from throbbers.spotify import SpotifyTokenClient
from throbbers.voting import VoteLedger, VoteRecorder


@dataclass
class Services:
    settings: Settings
    store: KeyValueStore
    sheet: Spreadsheet
    extra_tracks_sheet: Spreadsheet
    token_client: SpotifyTokenClient

    @property
    def tokens(self) -> TokenRepository:
        return TokenRepository(self.store)

    @property
    def artists(self) -> ArtistRepository:
        return ArtistRepository(self.store)

    @property
    def connection_check(self) -> ConnectionCheckRepository:
        return ConnectionCheckRepository(self.store)

    @property
    def ledger(self) -> VoteLedger:
        return VoteLedger(self.sheet)

    @property
    def vote_recorder(self) -> VoteRecorder:
        return VoteRecorder(
            artists=ArtistRepository(self.store),
            participants=ParticipantRepository(self.store),
            votes=VoteRepository(self.store),
            ledger=VoteLedger(self.sheet),
        )


def build_services(settings: Settings) -> Services:
    """Wire the production Firebase, Google Sheets and Spotify clients."""
    sheet = GspreadSpreadsheet.from_service_account(
        settings.google_service_account, settings.spreadsheet_id
    )
    if settings.extra_tracks_spreadsheet_id == settings.spreadsheet_id:
        extra_tracks_sheet = sheet
    else:
        extra_tracks_sheet = GspreadSpreadsheet.from_service_account(
            settings.google_service_account, settings.extra_tracks_spreadsheet_id
        )
    return Services(
        settings=settings,
        store=FirebaseKeyValueStore.from_settings(settings),
        sheet=sheet,
        extra_tracks_sheet=extra_tracks_sheet,
        token_client=SpotifyTokenClient(settings),
    )


def get_services(request: Request) -> Services:
    return request.app.state.services
