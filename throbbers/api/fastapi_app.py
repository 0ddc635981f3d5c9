from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from throbbers.api.auth.routes import router as auth_router
from throbbers.api.deps import Services, build_services
from throbbers.api.system.routes import router as system_router
from throbbers.api.voting.routes import router as voting_router
from throbbers.config import Settings
from throbbers.core import RelayError, configure_logging


async def _relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


def create_app(settings: Settings, services: Services | None = None) -> FastAPI:
    """
    Build the relay app.

    `services` defaults to the production Firebase / Google Sheets / Spotify
    clients built from `settings`; tests pass in-memory collaborators.
    """
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Throbbers Relay",
        version="1.0.0",
        description="Spotify OAuth relay and vote ledger for the Throbbers voting app.",
    )
    app.state.services = services or build_services(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RelayError, _relay_error_handler)

    app.include_router(system_router, tags=["system"])
    app.include_router(auth_router, tags=["auth"])
    app.include_router(voting_router, tags=["voting"])

    return app
