"""Runtime options for :mod:`pysetting`.

Options are read from the environment once at import time.  They are plain
module attributes so applications and tests can override them by assignment::

    import pysetting.config
    pysetting.config.listener_errors = "raise"
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

LISTENER_ERROR_MODES = ("isolate", "raise")


def _listener_errors_from_env() -> str:
    raw = os.environ.get("PYSETTING_LISTENER_ERRORS")
    if raw is None:
        return "isolate"
    mode = raw.strip().lower()
    if mode not in LISTENER_ERROR_MODES:
        logger.warning(
            "ignoring invalid PYSETTING_LISTENER_ERRORS=%r; expected one of %s",
            raw,
            ", ".join(LISTENER_ERROR_MODES),
        )
        return "isolate"
    return mode


# How a failing listener affects the rest of a notification pass.
# ``"isolate"`` keeps calling the remaining listeners and raises
# :class:`~pysetting.errors.ListenerError` afterwards, ``"raise"`` lets the
# first exception propagate immediately.
listener_errors = _listener_errors_from_env()


def configure_logging() -> None:
    """Attach a debug handler to the ``pysetting`` logger if requested.

    Does nothing unless ``PYSETTING_DEBUG`` is set, and never adds a second
    handler.
    """
    root = logging.getLogger("pysetting")
    if os.environ.get("PYSETTING_DEBUG") and not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))
        root.addHandler(handler)
        root.setLevel(logging.DEBUG)


__all__ = ["LISTENER_ERROR_MODES", "listener_errors", "configure_logging"]
