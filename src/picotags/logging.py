# src/picotags/logging.py
import logging
import sys

_ROOT_LOGGER = "picotags"


def _configure_root() -> logging.Logger:
    root = logging.getLogger(_ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        fmt = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)
        root.setLevel(logging.INFO)
    return root


def get_logger(name: str = _ROOT_LOGGER, verbose: bool = False) -> logging.Logger:
    """Return a logger under ``picotags``; only the root carries a handler."""

    _configure_root()
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
