"""Logging configuration helpers."""

import logging

# Supabase requests go through httpx, which logs every call at INFO.
_NOISY_LOGGERS = ("httpx", "httpcore", "hpack")


def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure the planner logger; safe to call more than once.

    ``level`` accepts a number or a level name such as ``"DEBUG"``. Calling
    again only changes the level.
    """
    if isinstance(level, str):
        level = level.upper()
    logger = logging.getLogger("nutrition_planner")
    logger.setLevel(level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
