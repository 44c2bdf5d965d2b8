"""
Environment-driven settings.

Values are read on every call so tests can tweak `os.environ` without
reloading modules.
"""

from __future__ import annotations

import os

DEFAULT_PORT = 8080
DEFAULT_HOST = "0.0.0.0"
DEFAULT_DB_PORT = 5432


def _env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_required(name: str) -> str:
    value = os.environ.get(name, "").strip()
    if not value:
        raise RuntimeError(f"{name} is not set.")
    return value


def port() -> int:
    return _env_int("PORT", DEFAULT_PORT)


def host() -> str:
    return _env_str("HOST", DEFAULT_HOST)


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


def cors_allow_origins() -> list[str]:
    raw = _env_str("CORS_ALLOW_ORIGINS", "*")
    origins = [item.strip() for item in raw.split(",")]
    return [item for item in origins if item] or ["*"]


def database_url() -> str | None:
    return os.environ.get("DATABASE_URL", "").strip() or None


def db_host() -> str:
    return _env_required("DB_HOST")


def db_port() -> int:
    return _env_int("DB_PORT", DEFAULT_DB_PORT)


def db_user() -> str:
    return _env_required("DB_USER")


def db_password() -> str:
    # An empty password is allowed (trust auth), an unset one is not.
    if "DB_PASS" not in os.environ:
        raise RuntimeError("DB_PASS is not set.")
    return os.environ["DB_PASS"]


def db_name() -> str:
    return _env_required("DB_NAME")


def db_pool_min_size() -> int:
    return max(0, _env_int("DB_POOL_MIN_SIZE", 1))


def db_pool_max_size() -> int:
    return max(1, _env_int("DB_POOL_MAX_SIZE", 10))


def db_command_timeout() -> float:
    return _env_float("DB_COMMAND_TIMEOUT", 30.0)
