from __future__ import annotations

import importlib

from dotenv import load_dotenv

from class_attendance.config import get_settings_module
from class_attendance.database.bootstrap import apply_schema
from class_attendance.database.connection import DBConfig, DatabaseConnection
from class_attendance.main import configure_logging


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    conn = DatabaseConnection.get_instance(DBConfig.from_dict(settings.DB_CONFIG))
    apply_schema(conn)
    cfg = conn.config
    print(f"OK: applied schema.sql -> {cfg.user}@{cfg.host}:{cfg.port}/{cfg.database}")


if __name__ == "__main__":
    main()
