from __future__ import annotations

import importlib

from conference_registration.config import get_settings_module
from conference_registration.database.bootstrap import ensure_sample_data
from conference_registration.database.connection import DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    ensure_sample_data(db_config)
    print(f"OK: Seeded database -> {DBConfig.from_dict(db_config).describe()}")


if __name__ == "__main__":
    main()
