"""Process-wide logging setup for Valet.

Modules ask for a named logger and never call basicConfig themselves:

    from valet.utils.logger import get_logger
    logger = get_logger(__name__)

The first logger requested configures the root handler at the level from
VALET_LOG_LEVEL; `gui.app.main` reconfigures it from Settings at startup.
"""
import logging
import os

DEFAULT_LEVEL = os.getenv("VALET_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = DEFAULT_LEVEL) -> None:
    numeric = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    # basicConfig is a no-op once a handler exists; the level still applies
    logging.getLogger().setLevel(numeric)


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
