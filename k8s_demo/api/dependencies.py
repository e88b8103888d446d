from __future__ import annotations

from fastapi import Request

from k8s_demo.catalog.items import Catalog


def get_catalog(request: Request) -> Catalog:
    """FastAPI dependency: the catalog built once by `create_app()`."""
    catalog = getattr(request.app.state, "catalog", None)
    if not isinstance(catalog, Catalog):
        raise RuntimeError("Catalog is not initialized on app.state")
    return catalog
