"""
Process-wide logging setup.

Modules only ever call `logging.getLogger(__name__)`; this module decides
where the lines go (console, plus a file sink when configured).
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers we installed so repeated calls don't stack them.
_HANDLER_ATTR = "_ledger_handler"


def configure_logging(level: str = "INFO", log_file: str = "") -> None:
    root = logging.getLogger()
    root.setLevel(level)

    if any(getattr(h, _HANDLER_ATTR, False) for h in root.handlers):
        return None

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_ATTR, True)
        root.addHandler(handler)
