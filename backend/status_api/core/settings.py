import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

# Environment variable that feeds each required database field.
REQUIRED_DB_ENV = {
    "host": "DB_HOST",
    "user": "DB_USER",
    "password": "DB_PASSWORD",
    "name": "DB_NAME",
}


class ConfigError(RuntimeError):
    """Raised when the process cannot start with the current configuration."""

    def __init__(self, message: str, missing: list[str] | None = None) -> None:
        super().__init__(message)
        self.missing = missing or []


class DatabaseConfig(BaseModel):
    host: str = Field(min_length=1)
    port: int = Field(default=5432, ge=1, le=65535)
    user: str = Field(min_length=1)
    password: str = Field(min_length=1)
    name: str = Field(min_length=1)

    @property
    def target(self) -> str:
        return f"{self.host}:{self.port}/{self.name}"


class ServerConfig(BaseModel):
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)


class Settings(BaseModel):
    database: DatabaseConfig
    server: ServerConfig = Field(default_factory=ServerConfig)


def _config_path() -> Path:
    return Path(os.environ.get("CONFIG_PATH", "config/config.json"))


def load_file_config(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON configuration at {path}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration at {path} must be a JSON object")
    for section in ("database", "server"):
        if not isinstance(data.get(section, {}), dict):
            raise ConfigError(f"Section '{section}' in {path} must be a JSON object")
    return data


def _env(key: str) -> str | None:
    # Empty values count as unset
    value = os.environ.get(key)
    return value if value else None


def load_env() -> dict[str, Any]:
    env_config: dict[str, Any] = {}

    for field, key in REQUIRED_DB_ENV.items():
        value = _env(key)
        if value:
            env_config.setdefault("database", {})[field] = value

    db_port = _env("DB_PORT")
    if db_port:
        env_config.setdefault("database", {})["port"] = db_port

    host = _env("HOST")
    if host:
        env_config.setdefault("server", {})["host"] = host

    port = _env("PORT")
    if port:
        env_config.setdefault("server", {})["port"] = port

    return env_config


def merge_settings(env_config: dict[str, Any], file_config: dict[str, Any]) -> dict[str, Any]:
    merged: dict[str, Any] = {}
    merged["database"] = {**file_config.get("database", {}), **env_config.get("database", {})}
    merged["server"] = {**file_config.get("server", {}), **env_config.get("server", {})}
    return merged


def _missing_db_vars(merged: dict[str, Any]) -> list[str]:
    database = merged.get("database", {})
    return [key for field, key in REQUIRED_DB_ENV.items() if not database.get(field)]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    env_config = load_env()
    file_config = load_file_config(_config_path())
    merged = merge_settings(env_config=env_config, file_config=file_config)

    missing = _missing_db_vars(merged)
    if missing:
        raise ConfigError(f"Missing DB env vars ({'/'.join(missing)})", missing=missing)

    try:
        return Settings.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Configuration error: {exc}") from exc


__all__ = [
    "ConfigError",
    "DatabaseConfig",
    "ServerConfig",
    "Settings",
    "get_settings",
    "load_env",
    "load_file_config",
    "merge_settings",
]
