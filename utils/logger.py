import logging
import os
import sys

BASE_LOGGER_NAME = "image_engine"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def setup_logger(level: int = logging.INFO, name: str = BASE_LOGGER_NAME) -> logging.Logger:
    """Create or update the project logger.

    - IMAGE_ENGINE_LOG_LEVEL overrides ``level`` on every call, so late CLI
      parsing can still take effect.
    - Keeps exactly one stderr StreamHandler on the base logger and updates
      its formatter instead of adding another.
    """
    logger = logging.getLogger(name)

    env_level = (os.getenv("IMAGE_ENGINE_LOG_LEVEL") or "").strip().lower()
    if env_level:
        level = _LEVELS.get(env_level, level)
    logger.setLevel(level)

    stream_handler = None
    for h in logger.handlers:
        if type(h) is logging.StreamHandler:
            stream_handler = h
            break

    if stream_handler is None:
        stream_handler = logging.StreamHandler(stream=sys.stderr)
        logger.addHandler(stream_handler)
    elif stream_handler.stream is not sys.stderr:
        # stderr may have been swapped (test capture, GUI redirection)
        stream_handler.stream = sys.stderr

    stream_handler.setFormatter(
        logging.Formatter(
            fmt="[%(asctime)s] %(levelname)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    base = logging.getLogger(BASE_LOGGER_NAME)
    if not base.handlers:
        base = setup_logger()
    return base if not name else base.getChild(name)
