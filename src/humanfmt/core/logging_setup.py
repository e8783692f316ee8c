"""Logging configuration for the command line entry point.

Library modules only create module-level loggers; handlers are installed
here, never at import time.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(*, verbose: bool = False) -> None:
    root = logging.getLogger("humanfmt")
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for handler in list(root.handlers):
        if getattr(handler, "_humanfmt_handler", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._humanfmt_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
