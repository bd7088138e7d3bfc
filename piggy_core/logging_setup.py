"""Logging configuration for the ``piggy_core`` package.

The CLI calls ``configure_logging()`` once; library modules only call
``get_logger(__name__)`` and never attach handlers of their own. Until the
package is configured its root logger carries a ``NullHandler``.
"""

from __future__ import annotations

import logging

_PKG_LOGGER_NAME = "piggy_core"
_CONFIGURED = False


def _parse_level(name: str) -> int:
    numeric = getattr(logging, name.strip().upper(), None)
    return numeric if isinstance(numeric, int) else logging.WARNING


def configure_logging() -> None:
    """Attach one stderr ``StreamHandler`` at the ``PIGGY_LOG_LEVEL`` level."""
    global _CONFIGURED
    if _CONFIGURED:
        return

    from piggy_core.io.config import get_settings

    level = _parse_level(get_settings().log_level)
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
    logger.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
