"""Logging configuration helpers."""

import logging

# httpx logs every outbound request at INFO; upstream failures are already
# logged by the photos client.
_TRANSPORT_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: str | int = logging.INFO) -> None:
    """Configure album service logging and quiet the HTTP transport loggers.

    Transport loggers stay at WARNING or above unless ``level`` is DEBUG.
    """
    if isinstance(level, str):
        level = logging.getLevelNamesMapping()[level.upper()]
    transport_level = level if level <= logging.DEBUG else max(level, logging.WARNING)
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)
    logger = logging.getLogger("album_service")
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
