from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter

from k8s_demo.catalog.schemas import HealthResponse


router = APIRouter()


def _utc_timestamp() -> str:
    # e.g. 2026-10-19T12:00:00.123Z
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/health")
def health() -> HealthResponse:
    return HealthResponse(status="healthy", timestamp=_utc_timestamp())
