"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration; override them via the
environment in a real deployment.
"""

import os
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Autoservice API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "autoservice.db")

    # Seconds a connection waits on a locked database before giving up.
    # Keeps every store call bounded instead of blocking forever.
    db_timeout: float = float(os.getenv("DB_TIMEOUT", "5.0"))

    # Capacity assigned to a mechanic registered (or replaced) without
    # an explicit ``max_complexity``.
    default_capacity: int = int(os.getenv("DEFAULT_CAPACITY", "10"))

    # Comma‑separated brand names seeded into the ``brands`` table on
    # startup.  Existing names are left alone.
    default_brands: str = os.getenv("DEFAULT_BRANDS", "Audi,BMW,Toyota,Ford")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    @property
    def default_brand_list(self) -> List[str]:
        return [name.strip() for name in self.default_brands.split(",") if name.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before this module is imported.
settings = Settings()
