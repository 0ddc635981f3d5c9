import logging

# Global project logger (can be tuned via logging_config)
logger = logging.getLogger("throbbers")


def log_info(message: str) -> None:
    """
    Neutral information message.
    """
    logger.info("%s", message)


def log_step(message: str) -> None:
    """
    Action step / ongoing work.
    """
    logger.info("→ %s", message)


def log_success(message: str) -> None:
    """
    Successful outcome.
    """
    logger.info("✅ %s", message)


def log_warning(message: str) -> None:
    """
    Warning / non-fatal problem.
    """
    logger.warning("⚠️ %s", message)


def log_error(message: str, exc: BaseException | None = None) -> None:
    """
    Error / fatal problem. When `exc` is given its traceback is logged too,
    so upstream causes end up in the logs and never in a response body.
    """
    logger.error("❌ %s", message, exc_info=exc)
