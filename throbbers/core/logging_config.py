import logging
import sys

# Client libraries that log every HTTP round trip at INFO/DEBUG.
NOISY_LOGGERS = ("urllib3", "google.auth", "gspread", "firebase_admin", "httpx")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def resolve_level(level: int | str) -> int:
    """
    Accept a numeric level or a name such as "debug"; unknown names map to INFO.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: int | str = logging.INFO) -> int:
    """
    Send relay logs to stdout at `level` and return the level applied.

    Calling it again only changes levels, so the app factory can apply
    LOG_LEVEL after api_main has set up the handler. Third-party client
    loggers stay at WARNING unless the relay itself runs at DEBUG.
    """
    resolved = resolve_level(level)
    root = logging.getLogger()

    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        root.addHandler(handler)
    root.setLevel(resolved)

    library_level = logging.DEBUG if resolved <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)

    if not isinstance(level, int) and resolved == logging.INFO and (
        str(level).strip().upper() != "INFO"
    ):
        logging.getLogger("throbbers").warning(
            "Unknown log level %r; using INFO.", level
        )
    return resolved
