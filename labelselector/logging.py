"""Logging setup for labelselector.

Every module obtains its logger through `get_logger(__name__)`; all of them
hang off the ``labelselector`` root logger, which gets one stdout handler.
"""

import logging
import sys
from typing import Optional

_ROOT_LOGGER_NAME = "labelselector"
_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger(
    level: int = logging.INFO,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``labelselector`` logger, once.

    Args:
        level: Level for the package root logger.
        handler: Handler to install; defaults to a stdout StreamHandler.
    """
    global _ROOT_LOGGER_CONFIGURED
    if _ROOT_LOGGER_CONFIGURED:
        return

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    # Propagate so pytest's caplog sees records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger inheriting the package root configuration."""
    setup_root_logger()
    return logging.getLogger(name)
