from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from k8s_demo.api.errors import APIError, api_error_handler, http_error_handler, unhandled_error_handler
from k8s_demo.catalog.info import SERVICE_NAME, SERVICE_VERSION
from k8s_demo.catalog.items import Catalog, default_catalog
from k8s_demo.config.load_config import configure_logging, load_service_config

from .routers.health import router as health_router
from .routers.info import router as info_router
from .routers.items import router as items_router


logger = logging.getLogger(__name__)


def create_app(catalog: Catalog | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):  # noqa: ANN202
        cfg = load_service_config()
        # Also runs in uvicorn reload workers, which never execute scripts/serve.py.
        configure_logging(cfg.log_level)
        logger.info("Backend server running on port %d", cfg.port)
        yield
        logger.info("Backend server stopped")

    app = FastAPI(title=SERVICE_NAME, version=SERVICE_VERSION, lifespan=lifespan)
    app.state.catalog = catalog if catalog is not None else default_catalog()

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Any origin may call the API (the dashboard is served from elsewhere).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router, tags=["system"])
    app.include_router(items_router, prefix="/api", tags=["items"])
    app.include_router(info_router, prefix="/api", tags=["system"])

    return app


app = create_app()
