"""
Logging configuration for the City Info API.

Every module logs through ``logging.getLogger(__name__)``; this module
wires the root logger to the console and, when ``LOG_FILE`` is set, to
a file.  Point of interest lookups that miss are logged at ``INFO``,
failed commits and mail deliveries at ``ERROR`` and unexpected read
failures at ``CRITICAL``.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers of third‑party libraries that are too chatty below WARNING.
_NOISY_LOGGERS = ("urllib3", "httpx")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, debug: bool = False) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Optional path of a log file, resolved against the current
        working directory.
    debug : bool
        When false, HTTP client libraries are limited to warnings so
        that mail delivery does not flood the log.
    """
    root = logging.getLogger()
    if root.handlers:
        # create_app may run several times in one process (tests).
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    if not debug:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
