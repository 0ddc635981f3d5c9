import json
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from dotenv import load_dotenv

from throbbers.core.errors import ConfigError

load_dotenv()

# Spotify API constants
SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"

# Google Sheets
SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]

ARTIST_ROSTER_RANGE = "ARTISTS!B1:D"
ARTIST_ROSTER_HEADER = "ARTIST"

LEDGER_HEADER_RANGE = "VOTES!A1:1"
LEDGER_HEADER_ANCHOR = "VOTES!A1"
LEDGER_APPEND_ANCHOR = "VOTES!A2"
# Participant columns run up to ZZ (700 participants).
LEDGER_RANGE = "VOTES!A:ZZ"

EXTRA_TRACKS_RANGE = "EXTRA!A2:C"

# Defaults for optional settings
DEFAULT_FRONTEND_URI = "https://throbbers-host.web.app/"
DEFAULT_CORS_ORIGINS = "https://throbbers-2025.web.app"
DEFAULT_PORT = 3000

_REQUIRED = (
    "SPOTIFY_CLIENT_ID",
    "SPOTIFY_CLIENT_SECRET",
    "REDIRECT_URI",
    "GOOGLE_SHEET_ID",
    "FIREBASE_SERVICE_ACCOUNT_JSON",
    "FIREBASE_DB_URL",
    "GOOGLE_SERVICE_ACCOUNT_JSON",
)


@dataclass(frozen=True)
class Settings:
    """
    Immutable process configuration, read once at startup and handed to
    every collaborator client.
    """

    spotify_client_id: str
    spotify_client_secret: str
    redirect_uri: str
    frontend_uri: str
    spreadsheet_id: str
    extra_tracks_spreadsheet_id: str
    firebase_service_account: Dict[str, Any]
    firebase_db_url: str
    google_service_account: Dict[str, Any]
    cors_origins: List[str]
    port: int = DEFAULT_PORT
    log_level: str = "INFO"


def _parse_service_account(name: str, raw: str) -> Dict[str, Any]:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"{name} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{name} must be a JSON object.")
    return data


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the environment (or the given mapping).

    Raises ConfigError listing every missing required variable.
    """
    env = os.environ if environ is None else environ

    missing = [name for name in _REQUIRED if not (env.get(name) or "").strip()]
    if missing:
        raise ConfigError(
            "Missing required environment variables: " + ", ".join(missing),
            missing=missing,
        )

    try:
        port = int(env.get("PORT") or DEFAULT_PORT)
    except ValueError as e:
        raise ConfigError(f"PORT must be an integer: {e}") from e

    spreadsheet_id = env["GOOGLE_SHEET_ID"].strip()
    origins = env.get("CORS_ORIGINS") or DEFAULT_CORS_ORIGINS

    return Settings(
        spotify_client_id=env["SPOTIFY_CLIENT_ID"].strip(),
        spotify_client_secret=env["SPOTIFY_CLIENT_SECRET"].strip(),
        redirect_uri=env["REDIRECT_URI"].strip(),
        frontend_uri=(env.get("FRONTEND_URI") or DEFAULT_FRONTEND_URI).strip(),
        spreadsheet_id=spreadsheet_id,
        extra_tracks_spreadsheet_id=(
            env.get("EXTRA_TRACKS_SHEET_ID") or spreadsheet_id
        ).strip(),
        firebase_service_account=_parse_service_account(
            "FIREBASE_SERVICE_ACCOUNT_JSON", env["FIREBASE_SERVICE_ACCOUNT_JSON"]
        ),
        firebase_db_url=env["FIREBASE_DB_URL"].strip(),
        google_service_account=_parse_service_account(
            "GOOGLE_SERVICE_ACCOUNT_JSON", env["GOOGLE_SERVICE_ACCOUNT_JSON"]
        ),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        port=port,
        log_level=(env.get("LOG_LEVEL") or "INFO").strip().upper(),
    )
