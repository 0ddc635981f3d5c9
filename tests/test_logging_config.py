import logging

import pytest

from throbbers.core.logging_config import (
    NOISY_LOGGERS,
    configure_logging,
    resolve_level,
)


@pytest.fixture(autouse=True)
def restore_levels():
    names = ("",) + NOISY_LOGGERS
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


@pytest.mark.parametrize(
    "level, expected",
    [
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        (logging.ERROR, logging.ERROR),
        ("verbose", logging.INFO),
    ],
)
def test_resolve_level(level, expected) -> None:
    assert resolve_level(level) == expected


def test_configure_logging_applies_named_level_and_quiets_clients() -> None:
    assert configure_logging("error") == logging.ERROR

    assert logging.getLogger().level == logging.ERROR
    assert logging.getLogger("urllib3").level == logging.WARNING
    assert logging.getLogger("gspread").level == logging.WARNING


def test_configure_logging_debug_opens_up_clients() -> None:
    configure_logging("DEBUG")

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("google.auth").level == logging.DEBUG


def test_configure_logging_is_idempotent() -> None:
    configure_logging()
    handlers = list(logging.getLogger().handlers)

    configure_logging("WARNING")

    assert logging.getLogger().handlers == handlers
