import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from config import LOG_FILE, LOG_LEVEL

_LOGGER_CONFIGURED = False


def configure_logging(log_file: Optional[str] = LOG_FILE, level: str = LOG_LEVEL) -> None:
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    # Console goes to stderr so it never interleaves with the shell's stdout
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s]: %(message)s",
    )

    if log_file:
        handler = RotatingFileHandler(
            log_file,
            maxBytes=1_000_000,   # ~1 MB
            backupCount=3,
            encoding="utf-8",
        )
        handler.setLevel(level)
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)s [%(name)s]: %(message)s"
        )
        handler.setFormatter(formatter)
        logging.getLogger().addHandler(handler)

    _LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """
    Return a configured logger.
    The first call sets logging up (console plus the LOG_FILE rotating log).
    """
    configure_logging()
    return logging.getLogger(name)
