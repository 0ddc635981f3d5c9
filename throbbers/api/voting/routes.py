from typing import Any, List

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import JSONResponse

from throbbers.api.deps import Services, get_services
from throbbers.core import (
    ExtraTrack,
    MissingParameter,
    RelayError,
    UpstreamReadFailure,
    UpstreamWriteFailure,
    log_error,
    log_success,
)
from throbbers.voting import get_artist_info, load_extra_tracks

from .schemas import (
    ArtistInfoResponse,
    MessageResponse,
    RecordVotesResponse,
    ThrobCountResponse,
)

router = APIRouter()


@router.post("/record-votes", response_model=RecordVotesResponse)
def record_votes(
    body: Any = Body(None),
    services: Services = Depends(get_services),
) -> RecordVotesResponse:
    """
    Store the latest votes for one artist and append an audit row to the
    ledger sheet.
    """
    payload = body if isinstance(body, dict) else {}
    artist = payload.get("artist")
    votes = payload.get("votes")
    try:
        services.vote_recorder.record(artist, votes)
    except RelayError:
        raise
    except Exception as e:  # noqa: BLE001
        log_error("Vote record failed", e)
        raise UpstreamWriteFailure("Failed to record votes") from e
    return RecordVotesResponse(success=True)


@router.get("/artist-info", response_model=ArtistInfoResponse)
def artist_info(services: Services = Depends(get_services)) -> ArtistInfoResponse:
    try:
        info = get_artist_info(services.sheet, services.artists)
    except Exception as e:  # noqa: BLE001
        log_error("Failed to return artist info", e)
        raise UpstreamReadFailure("Failed to load artist info") from e
    return ArtistInfoResponse(**info)


@router.get("/throb-count", response_model=ThrobCountResponse)
def throb_count(
    host: str | None = Query(default=None),
    services: Services = Depends(get_services),
) -> ThrobCountResponse:
    """Number of "yes" votes a participant has cast, read from the ledger."""
    if not host or not host.strip():
        raise MissingParameter("Missing host parameter")
    try:
        count = services.ledger.count_yes(host)
    except RelayError:
        raise
    except Exception as e:  # noqa: BLE001
        log_error("Failed to count votes", e)
        raise UpstreamReadFailure("Failed to count votes") from e
    return ThrobCountResponse(count=count)


@router.get("/extra-tracks", response_model=List[ExtraTrack])
def extra_tracks(services: Services = Depends(get_services)) -> List[ExtraTrack]:
    try:
        return load_extra_tracks(services.extra_tracks_sheet)
    except Exception as e:  # noqa: BLE001
        log_error("Failed to load extra tracks", e)
        raise UpstreamReadFailure("Failed to load extra tracks") from e


@router.post("/clear-sheet", response_model=MessageResponse)
def clear_sheet(services: Services = Depends(get_services)):
    """Wipe the vote ledger. Irreversible."""
    try:
        services.ledger.clear()
    except Exception as e:  # noqa: BLE001
        log_error("Failed to clear Google Sheet", e)
        return JSONResponse(
            {"message": "Failed to clear Google Sheet."}, status_code=500
        )
    log_success("Vote ledger cleared")
    return MessageResponse(message="✅ Google Sheet cleared.")
