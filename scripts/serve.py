#!/usr/bin/env python3
from __future__ import annotations

import sys
from pathlib import Path


REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from k8s_demo.config.load_config import ConfigError, configure_logging, load_service_config  # noqa: E402


def main() -> int:
    try:
        cfg = load_service_config()
    except ConfigError as e:
        print(str(e), file=sys.stderr)
        return 2

    configure_logging(cfg.log_level)

    try:
        import uvicorn  # type: ignore
    except Exception as e:
        print("Missing dependency: uvicorn. Install it in your runtime environment.", file=sys.stderr)
        print(str(e), file=sys.stderr)
        return 1

    uvicorn.run(
        "k8s_demo.api.app:app",
        host=cfg.host,
        port=cfg.port,
        reload=cfg.reload,
        log_level=cfg.log_level,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
