from __future__ import annotations

import os
from pathlib import Path


class Settings:
    """Grundläggande inställningar för appen."""

    def __init__(self) -> None:
        self.base_dir = Path(__file__).resolve().parent.parent
        self.data_dir = self.base_dir / "data"
        self.static_dir = self.base_dir / "static"
        self.template_dir = self.base_dir / "templates"
        self.database_path = Path(os.getenv("DATABASE_PATH", str(self.data_dir / "app.db")))
        # Motsvarar SharedPreferences-filen i mobilappen
        self.preferences_name = os.getenv("PREFERENCES_NAME", "usuario")
        self.app_name = os.getenv("APP_NAME", "Registro de Usuario")
        self.app_author = os.getenv("APP_AUTHOR", "Saraí Flores")
        self.app_version = os.getenv("APP_VERSION", "1.0")
        self.debug = os.getenv("DEBUG", "false").lower() == "true"
        self.log_level = os.getenv("LOG_LEVEL", "DEBUG" if self.debug else "INFO").upper()
        self.log_json = os.getenv("LOG_JSON", "false").lower() == "true"


settings = Settings()
