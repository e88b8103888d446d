from __future__ import annotations

import logging
from dataclasses import dataclass

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)


@dataclass
class APIError(Exception):
    status_code: int
    message: str


def error_response(*, status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=int(status_code), content={"error": message}, headers=headers)


async def api_error_handler(_req: Request, exc: APIError) -> JSONResponse:
    return error_response(status_code=exc.status_code, message=exc.message)


async def http_error_handler(_req: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Framework errors (unknown route, wrong method) use the same envelope; keeps e.g. the Allow header.
    return error_response(status_code=exc.status_code, message=str(exc.detail), headers=exc.headers)


async def unhandled_error_handler(req: Request, exc: Exception) -> JSONResponse:
    # Details stay in the server log; clients only get a generic envelope.
    logger.exception("Unhandled error on %s %s", req.method, req.url.path, exc_info=exc)
    return error_response(status_code=500, message="Internal server error")
