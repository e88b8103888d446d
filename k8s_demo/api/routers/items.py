from __future__ import annotations

from fastapi import APIRouter, Depends

from k8s_demo.api.dependencies import get_catalog
from k8s_demo.api.errors import APIError
from k8s_demo.catalog.items import Catalog, parse_item_id
from k8s_demo.catalog.schemas import ErrorResponse, ItemListResponse, ItemSchema


router = APIRouter()


@router.get("/items")
def list_items(catalog: Catalog = Depends(get_catalog)) -> ItemListResponse:
    items = [ItemSchema.from_item(it) for it in catalog]
    return ItemListResponse(items=items, count=len(items))


@router.get("/items/{item_id}", responses={404: {"model": ErrorResponse}})
def get_item(item_id: str, catalog: Catalog = Depends(get_catalog)) -> ItemSchema:
    """Fetch one item by id.

    The id is taken as a raw string and parsed here, so a non-numeric id ends up
    as the same 404 as an unknown one instead of a validation error.
    """
    item = catalog.get(parse_item_id(item_id))
    if item is None:
        raise APIError(status_code=404, message="Item not found")
    return ItemSchema.from_item(item)
