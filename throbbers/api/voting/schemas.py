from typing import Any, Dict, List

from pydantic import BaseModel


class RecordVotesResponse(BaseModel):
    success: bool = True


class TrackLinkInfo(BaseModel):
    name: str
    url: str


class ArtistInfoResponse(BaseModel):
    order: List[Any]
    names: Dict[str, str]
    tracks: Dict[str, List[TrackLinkInfo]]


class ThrobCountResponse(BaseModel):
    count: int


class MessageResponse(BaseModel):
    message: str
