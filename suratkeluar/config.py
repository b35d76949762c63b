# suratkeluar/config.py
"""
Konfigurasi aplikasi dari environment (.env dimuat via python-dotenv).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()  # idempotent

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


class Settings:
    APP_NAME: str = os.getenv("APP_NAME", "Aplikasi Surat LPM UNIROW")
    APP_VERSION: str = "1.0.0"
    APP_ENV: str = os.getenv("APP_ENV", "development").lower()
    APP_DEBUG: bool = _env_bool("APP_DEBUG")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "")

    # --- Auth ---
    SECRET_KEY: str = os.getenv("SECRET_KEY", "")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = _env_int("ACCESS_TOKEN_EXPIRE_MINUTES", 60)
    ADMIN_EMAIL: str = os.getenv("ADMIN_EMAIL", "admin@lpm.local")
    ADMIN_PASSWORD: str = os.getenv("ADMIN_PASSWORD", "")
    RATE_LIMIT_ENABLED: bool = _env_bool("RATE_LIMIT_ENABLED", "1")
    LOGIN_RATE_LIMIT: str = os.getenv("LOGIN_RATE_LIMIT", "10/minute")

    # --- Storage / DB ---
    DATA_DIR: Path = Path(os.getenv("DATA_DIR", str(BASE_DIR / "data")))
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")
    MYSQL_USE: bool = _env_bool("MYSQL_USE")
    MYSQL_URL: str = os.getenv("MYSQL_URL", "")

    # --- Penomoran & tampilan ---
    KODE_INSTANSI: str = os.getenv("KODE_INSTANSI", "071073/LPM")
    ITEMS_PER_PAGE: int = _env_int("ITEMS_PER_PAGE", 20)
    MIN_SEARCH_CHARS: int = _env_int("MIN_SEARCH_CHARS", 2)
    RECENT_TUJUAN_LIMIT: int = _env_int("RECENT_TUJUAN_LIMIT", 5)
    SEARCH_TUJUAN_LIMIT: int = _env_int("SEARCH_TUJUAN_LIMIT", 10)

    @property
    def DB_FILE(self) -> Path:
        return self.DATA_DIR / "surat.db"


settings = Settings()
DB_FILE = settings.DB_FILE


def ensure_dirs() -> None:
    settings.DATA_DIR.mkdir(parents=True, exist_ok=True)
