from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse

from throbbers.api.deps import Services, get_services
from throbbers.core import log_error, log_success
from throbbers.spotify import SpotifyAuthError

router = APIRouter()


@router.get("/callback")
def auth_callback(
    code: str | None = Query(default=None),
    services: Services = Depends(get_services),
):
    """
    Spotify redirect target.

    Exchanges the code, stores both tokens, then sends the browser to the
    frontend with the tokens in the URL fragment.
    """
    if not code:
        return PlainTextResponse("Missing code", status_code=400)

    try:
        token_info = services.token_client.exchange_code(code)
        access_token = token_info["access_token"]
        refresh_token = token_info["refresh_token"]
        services.tokens.save_tokens(access_token, refresh_token)
    except SpotifyAuthError as e:
        log_error(f"Error during token exchange: {e.payload}")
        return JSONResponse(e.payload, status_code=e.status_code)
    except Exception as e:  # noqa: BLE001
        log_error("Token exchange error", e)
        return PlainTextResponse("Token exchange failed", status_code=500)

    log_success("Spotify tokens stored")
    fragment = urlencode(
        {"access_token": access_token, "refresh_token": refresh_token}
    )
    return RedirectResponse(
        url=f"{services.settings.frontend_uri}#{fragment}", status_code=302
    )


@router.get("/refresh")
def refresh_access_token(
    refresh_token: str | None = Query(default=None),
    services: Services = Depends(get_services),
):
    if not refresh_token:
        return PlainTextResponse("Missing refresh_token", status_code=400)

    try:
        return services.token_client.refresh(refresh_token)
    except SpotifyAuthError as e:
        return JSONResponse(e.payload, status_code=e.status_code)
    except Exception as e:  # noqa: BLE001
        log_error("Refresh token error", e)
        return PlainTextResponse("Refresh failed", status_code=500)
