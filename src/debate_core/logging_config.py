"""Logging setup for the debate core.

Every module logs through ``logging.getLogger(__name__)``; this module only
wires handlers and levels once, at process start.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Install a stdout handler on the root logger.

    The root logger stays at WARNING to keep third-party noise down; only the
    ``debate_core`` logger is raised to ``level``.

    Args:
        level: Log level name for the ``debate_core`` logger.

    Returns:
        The root logger.
    """
    root = logging.getLogger()
    root.setLevel(logging.WARNING)

    if not any(getattr(h, "_debate_core", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._debate_core = True  # type: ignore[attr-defined]
        root.addHandler(handler)

    logging.getLogger("debate_core").setLevel(getattr(logging, level.upper(), logging.INFO))
    logging.getLogger("debate_core").info("Logging is set up (level=%s)", level.upper())

    return root
