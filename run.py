"""Start the conference registration API (development server)."""

from __future__ import annotations

import importlib
import logging
import sys

from dotenv import load_dotenv

from conference_registration.config import get_settings_module
from conference_registration.core.exceptions import PersistenceError
from conference_registration.main import create_app

logger = logging.getLogger("conference_registration.run")


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())

    try:
        app = create_app()
    except PersistenceError as e:
        logger.critical("Failed to start server: %s", e)
        sys.exit(1)

    app.run(
        host=getattr(settings, "HOST", "127.0.0.1"),
        port=int(getattr(settings, "PORT", 3000)),
        debug=bool(getattr(settings, "DEBUG", False)),
    )


if __name__ == "__main__":
    main()
