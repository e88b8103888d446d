from __future__ import annotations

import sys
from pathlib import Path

import pytest


# Ensure `import k8s_demo...` works when running `pytest` from repo root.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Unset every environment variable the service reads."""
    for name in ("PORT", "HOSTNAME", "POD_NAME", "NODE_ENV", "LOG_LEVEL", "RELOAD", "API_URL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
