from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_HANDLER_MARKER = "_conference_registration_handler"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None, *, fmt: str = DEFAULT_LOG_FORMAT) -> logging.Logger:
    root = logging.getLogger()
    root.setLevel(logging.WARNING)  # keep third-party libraries quiet

    # create_app may run several times in one process (tests); replace our handlers.
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(fmt)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    setattr(stream_handler, _HANDLER_MARKER, True)
    root.addHandler(stream_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(log_file, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        file_handler.setFormatter(formatter)
        setattr(file_handler, _HANDLER_MARKER, True)
        root.addHandler(file_handler)

    package_logger = logging.getLogger("conference_registration")
    package_logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    return package_logger
