"""
Logging setup for the warranty checker.

Module loggers live under ``warranty_checker``; they and uvicorn's
loggers propagate to the root logger, which gets a console handler and,
when ``LOG_FILE`` is set, a file handler.  Lookups are logged at INFO
with the serial only, never the contact.
"""

import logging
from pathlib import Path
from typing import List, Optional

from .config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Name given to the handlers added here, so repeated calls can find them.
HANDLER_NAME = "warranty_checker"


def setup_logging(level: Optional[str] = None, logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    ``level`` and ``logfile`` default to ``LOG_LEVEL`` and ``LOG_FILE``.
    Unknown level names mean ``INFO``.  The log file's directory is
    created if missing.  Handlers are attached once per process; later
    calls (one per ``create_app``) only update the level.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, (level or settings.log_level).upper(), logging.INFO))
    if any(handler.get_name() == HANDLER_NAME for handler in root.handlers):
        return

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    logfile = settings.log_file if logfile is None else logfile
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(formatter)
        root.addHandler(handler)
