from dataclasses import dataclass, field
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

YES = "yes"
NO = "no"


@dataclass
class TrackLink:
    name: str
    url: str


@dataclass
class ArtistRecord:
    """
    One artist from the roster sheet.

    - safe_key     : sanitized, storage-key-safe form of display_name
    - display_name : name as typed in the sheet
    - tracks       : tracks listed for the artist, in sheet order
    """

    safe_key: str
    display_name: str
    tracks: List[TrackLink] = field(default_factory=list)


class VoteRecord(BaseModel):
    """Latest votes for one artist, as persisted under votes/<safeKey>."""

    model_config = ConfigDict(populate_by_name=True)

    original_name: str = Field(alias="originalName")
    votes: Dict[str, str]
    timestamp: str

    def to_store(self) -> Dict[str, object]:
        return self.model_dump(by_alias=True)


class ExtraTrack(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    artist: str
    track: str
    spotify_url: str = Field(alias="spotifyUrl")
