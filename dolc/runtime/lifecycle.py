"""Process lifecycle for dolc.

``initialize()`` performs the one-time startup side effect (attaching a log
handler to the ``dolc`` logger) and ``shutdown()`` undoes it. Both are
idempotent and thread-safe. Compilation never depends on either: results
are identical before, during, and after initialization.
"""

from __future__ import annotations

import logging
import threading

from dolc.core.config import DolConfig, get_config
from dolc.core.types import COMPILER_VERSION

logger = logging.getLogger("dolc")

_lock = threading.Lock()
_handler: logging.Handler | None = None


def initialize(config: DolConfig | None = None) -> None:
    """Attach the dolc log handler once. Later calls are no-ops.

    Raises ValueError if the configured log level is unknown; nothing is
    attached in that case, so a corrected call can follow.
    """
    global _handler
    with _lock:
        if _handler is not None:
            return

        config = config or get_config()
        # Level first: a bad level must not leave a handler behind
        try:
            logger.setLevel(config.log_level)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid log level: {config.log_level!r}") from e

        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(config.log_format))
        logger.addHandler(handler)
        _handler = handler

    logger.info("DOL compiler %s initialized", COMPILER_VERSION)


def shutdown() -> None:
    """Detach the handler installed by initialize(). Safe to call repeatedly."""
    global _handler
    with _lock:
        if _handler is None:
            return
        logger.removeHandler(_handler)
        _handler.close()
        _handler = None
        logger.setLevel(logging.NOTSET)


def is_initialized() -> bool:
    """Return True between initialize() and shutdown()."""
    with _lock:
        return _handler is not None
