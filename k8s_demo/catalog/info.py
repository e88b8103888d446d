from __future__ import annotations

from dataclasses import dataclass


SERVICE_NAME = "k8s-demo-backend"
SERVICE_VERSION = "1.0.0"

DEFAULT_HOSTNAME = "unknown"
DEFAULT_POD_NAME = "local"
DEFAULT_NODE_ENV = "development"


@dataclass(frozen=True)
class ServerInfo:
    """Per-request snapshot of service identity and runtime placement."""

    hostname: str = DEFAULT_HOSTNAME
    pod_name: str = DEFAULT_POD_NAME
    node_env: str = DEFAULT_NODE_ENV
    service: str = SERVICE_NAME
    version: str = SERVICE_VERSION
