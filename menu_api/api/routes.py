from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request

from menu_api.core.errors import FieldViolation, MenuValidationError
from menu_api.menu.models import DeleteConfirmation, MenuItem, MenuItemFields
from menu_api.menu.store import MenuStore, parse_item_id
from menu_api.menu.validation import validate_menu_item

router = APIRouter(prefix="/api/menu", tags=["menu"])


def get_store(request: Request) -> MenuStore:
    return request.app.state.store


async def read_json_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError as exc:
        raise MenuValidationError(
            [FieldViolation(field="body", message="Request body must be valid JSON")]
        ) from exc


async def validated_fields(body: Any = Depends(read_json_body)) -> MenuItemFields:
    return validate_menu_item(body)


@router.get("", response_model=list[MenuItem])
async def list_menu_items(store: MenuStore = Depends(get_store)) -> list[MenuItem]:
    return store.list_all()


@router.get("/{item_id}", response_model=MenuItem)
async def get_menu_item(item_id: str, store: MenuStore = Depends(get_store)) -> MenuItem:
    return store.get_by_id(parse_item_id(item_id))


@router.post("", response_model=MenuItem, status_code=201)
async def create_menu_item(
    fields: MenuItemFields = Depends(validated_fields),
    store: MenuStore = Depends(get_store),
) -> MenuItem:
    return store.create(fields)


@router.put("/{item_id}", response_model=MenuItem)
async def update_menu_item(
    item_id: str,
    fields: MenuItemFields = Depends(validated_fields),
    store: MenuStore = Depends(get_store),
) -> MenuItem:
    return store.update(parse_item_id(item_id), fields)


@router.delete("/{item_id}", response_model=DeleteConfirmation)
async def delete_menu_item(item_id: str, store: MenuStore = Depends(get_store)) -> DeleteConfirmation:
    return store.delete(parse_item_id(item_id))
