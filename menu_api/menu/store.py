from __future__ import annotations

import re
import threading
from collections.abc import Iterable

import structlog

from menu_api.core.errors import MenuItemNotFoundError
from menu_api.menu.models import DeleteConfirmation, MenuItem, MenuItemFields
from menu_api.menu.seed import load_seed_items

logger = structlog.get_logger(__name__)

LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def parse_item_id(raw: str) -> int | None:
    """Read the leading integer of a path segment, so ``"3abc"`` is 3.

    Segments without leading ASCII digits give ``None``, which matches no item.
    """
    match = LEADING_INT_RE.match(raw)
    if match is None:
        return None
    return int(match.group(1))


class MenuStore:
    """In-memory, insertion-ordered collection of menu items.

    Every operation holds the store lock, so a single instance can be shared
    by request handlers running on worker threads.
    """

    def __init__(self, items: Iterable[MenuItem] | None = None) -> None:
        self._items: list[MenuItem] = list(items or [])
        self._lock = threading.Lock()
        ids = [item.id for item in self._items]
        if len(ids) != len(set(ids)):
            raise ValueError("Menu item ids must be unique")

    @classmethod
    def seeded(cls) -> MenuStore:
        return cls(load_seed_items())

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def list_all(self) -> list[MenuItem]:
        with self._lock:
            return list(self._items)

    def get_by_id(self, item_id: int | None) -> MenuItem:
        with self._lock:
            return self._items[self._index_of(item_id)]

    def create(self, fields: MenuItemFields) -> MenuItem:
        with self._lock:
            item = MenuItem.from_fields(self._next_id(), fields)
            self._items.append(item)
        logger.info("menu_item_created", item_id=item.id, name=item.name)
        return item

    def update(self, item_id: int | None, fields: MenuItemFields) -> MenuItem:
        with self._lock:
            index = self._index_of(item_id)
            item = MenuItem.from_fields(self._items[index].id, fields)
            self._items[index] = item
        logger.info("menu_item_updated", item_id=item.id)
        return item

    def delete(self, item_id: int | None) -> DeleteConfirmation:
        with self._lock:
            index = self._index_of(item_id)
            removed = self._items.pop(index)
        logger.info("menu_item_deleted", item_id=removed.id)
        return DeleteConfirmation()

    def _next_id(self) -> int:
        # one past the highest id currently stored
        if not self._items:
            return 1
        return max(item.id for item in self._items) + 1

    def _index_of(self, item_id: int | None) -> int:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        raise MenuItemNotFoundError(item_id)
