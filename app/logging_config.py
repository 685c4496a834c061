"""
Logging setup for the User Records API.

Every module logs through ``logging.getLogger(__name__)``; this module only
attaches a console handler to the root logger.  ``setup_logging`` is
idempotent so the lifespan hook and the test suite can both call it.
"""
import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger with a single console handler.

    Unknown level names fall back to INFO.  When the root logger already has
    handlers (pytest's capture handler, uvicorn's config) only the level is
    adjusted.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
