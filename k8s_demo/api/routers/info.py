from __future__ import annotations

from fastapi import APIRouter

from k8s_demo.catalog.schemas import ServerInfoResponse
from k8s_demo.config.load_config import read_server_info


router = APIRouter()


@router.get("/info")
def info() -> ServerInfoResponse:
    # Environment is re-read per request so pod metadata changes are visible.
    return ServerInfoResponse.from_info(read_server_info())
