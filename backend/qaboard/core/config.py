"""Process configuration: read once at startup, passed explicitly afterwards."""
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
BACKEND_DIR = os.path.abspath(os.path.join(BASE_DIR, "..", ".."))

STORAGE_MODES = ("s3", "local", "fallback")
_TRUTHY = {"1", "true", "yes", "on"}


class ConfigError(Exception):
    """Raised when the process cannot start with the given environment."""


@dataclass(frozen=True)
class Settings:
    storage_mode: str
    bucket: Optional[str] = None
    region: str = "us-east-1"
    storage_prefix: str = ""
    data_dir: Optional[str] = None
    web_root: Optional[str] = None
    host: str = "0.0.0.0"
    port: int = 8080
    require_auth: bool = False
    log_level: str = "INFO"


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _resolve_mode(explicit: Optional[str], bucket: Optional[str], data_dir: Optional[str]) -> str:
    if explicit:
        mode = explicit.lower()
        if mode not in STORAGE_MODES:
            raise ConfigError(f"Unknown STORAGE_MODE '{explicit}'. Must be one of {STORAGE_MODES}.")
        return mode
    if bucket:
        return "s3"
    if data_dir:
        return "local"
    raise ConfigError("No storage target configured: set BUCKET or DATA_DIR.")


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the environment. When no mapping is passed, the
    backend .env file is loaded first and os.environ is used.
    """
    if environ is None:
        load_dotenv(os.path.join(BACKEND_DIR, ".env"))
        environ = os.environ

    bucket = _blank_to_none(environ.get("BUCKET"))
    data_dir = _blank_to_none(environ.get("DATA_DIR"))
    mode = _resolve_mode(_blank_to_none(environ.get("STORAGE_MODE")), bucket, data_dir)

    if mode in ("s3", "fallback") and not bucket:
        raise ConfigError(f"Missing env BUCKET (required for STORAGE_MODE={mode}).")
    if mode in ("local", "fallback") and not data_dir:
        raise ConfigError(f"Missing env DATA_DIR (required for STORAGE_MODE={mode}).")

    port_raw = environ.get("PORT") or "8080"
    try:
        port = int(port_raw)
    except ValueError:
        raise ConfigError(f"PORT must be an integer, got '{port_raw}'.")

    region = (
        _blank_to_none(environ.get("AWS_REGION"))
        or _blank_to_none(environ.get("AWS_DEFAULT_REGION"))
        or "us-east-1"
    )

    return Settings(
        storage_mode=mode,
        bucket=bucket,
        region=region,
        storage_prefix=(environ.get("STORAGE_PREFIX") or "").strip().strip("/"),
        data_dir=os.path.abspath(data_dir) if data_dir else None,
        web_root=_blank_to_none(environ.get("WEB_ROOT")),
        host=environ.get("HOST") or "0.0.0.0",
        port=port,
        require_auth=(environ.get("REQUIRE_AUTH") or "").strip().lower() in _TRUTHY,
        log_level=(environ.get("LOG_LEVEL") or "INFO").upper(),
    )
