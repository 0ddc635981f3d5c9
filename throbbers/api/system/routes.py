from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from throbbers.api.deps import Services, get_services
from throbbers.core import log_error, log_success

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "✅ Spotify Auth Server is running"


@router.get("/ping", response_class=PlainTextResponse)
def ping() -> str:
    return "pong"


@router.get("/test-firebase", response_class=PlainTextResponse)
def test_firebase(services: Services = Depends(get_services)):
    """
    Write a check value to the key-value store to check credentials and
    connectivity.
    """
    try:
        timestamp = services.connection_check.write_check()
    except Exception as e:  # noqa: BLE001
        log_error("Firebase test write failed", e)
        return PlainTextResponse("❌ Firebase write failed", status_code=500)

    log_success("Firebase test write succeeded")
    return f"✅ Firebase write succeeded at {timestamp}"
