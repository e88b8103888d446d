from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any

from k8s_demo.catalog.info import DEFAULT_HOSTNAME, DEFAULT_NODE_ENV, DEFAULT_POD_NAME, ServerInfo


DEFAULT_PORT = 3001
DEFAULT_HOST = "0.0.0.0"
DEFAULT_API_URL = "http://localhost:3001"
DEFAULT_NOTICE_DURATION_S = 3.0

# Names uvicorn accepts for --log-level, mapped to stdlib levels ("trace" is uvicorn-only).
LOG_LEVELS: dict[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": 5,
}


class ConfigError(RuntimeError):
    pass


def _as_int(value: Any, *, key: str) -> int:
    try:
        return int(value)
    except Exception as e:
        raise ConfigError(f"Invalid int for {key}: {value!r}") from e


def _as_float(value: Any, *, key: str) -> float:
    try:
        return float(value)
    except Exception as e:
        raise ConfigError(f"Invalid float for {key}: {value!r}") from e


def _env(name: str, default: str) -> str:
    # Empty values fall back to the default, same as unset ones.
    return os.getenv(name) or default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip().lower()
    if v in {"1", "true", "yes", "y", "on"}:
        return True
    if v in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclass(frozen=True)
class ServiceConfig:
    host: str
    port: int
    log_level: str
    reload: bool


@dataclass(frozen=True)
class DashboardConfig:
    api_url: str
    notice_duration_s: float


def load_service_config() -> ServiceConfig:
    port = _as_int(_env("PORT", str(DEFAULT_PORT)), key="PORT")
    if not (0 < port < 65536):
        raise ConfigError(f"Invalid PORT: must be in [1..65535], got {port}")
    log_level = _env("LOG_LEVEL", "info").strip().lower()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"Invalid LOG_LEVEL: {log_level!r}, expected one of {sorted(LOG_LEVELS)}")
    return ServiceConfig(
        host=DEFAULT_HOST,
        port=port,
        log_level=log_level,
        reload=_env_bool("RELOAD", False),
    )


def load_dashboard_config(*, api_url: str | None = None, notice_duration_s: float | None = None) -> DashboardConfig:
    url = (api_url or _env("API_URL", DEFAULT_API_URL)).strip().rstrip("/")
    if not url:
        raise ConfigError("Invalid API_URL: empty string")
    duration = DEFAULT_NOTICE_DURATION_S if notice_duration_s is None else notice_duration_s
    duration = _as_float(duration, key="notice_duration_s")
    if duration <= 0:
        raise ConfigError(f"Invalid notice_duration_s: must be > 0, got {duration}")
    return DashboardConfig(api_url=url, notice_duration_s=duration)


def read_server_info() -> ServerInfo:
    """Build a ServerInfo from the current environment (read on every call)."""
    return ServerInfo(
        hostname=_env("HOSTNAME", DEFAULT_HOSTNAME),
        pod_name=_env("POD_NAME", DEFAULT_POD_NAME),
        node_env=_env("NODE_ENV", DEFAULT_NODE_ENV),
    )


def configure_logging(level: str = "info") -> None:
    name = (level or "info").strip().lower()
    if name not in LOG_LEVELS:
        raise ConfigError(f"Invalid log level: {level!r}, expected one of {sorted(LOG_LEVELS)}")
    logging.basicConfig(
        level=LOG_LEVELS[name],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
