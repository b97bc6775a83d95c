from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from menu_api.main import create_app
from menu_api.menu.store import MenuStore


@pytest.fixture()
def store() -> MenuStore:
    return MenuStore.seeded()


@pytest.fixture()
def client(store: MenuStore) -> TestClient:
    return TestClient(create_app(store))


@pytest.fixture()
def veggie_wrap() -> dict[str, object]:
    return {
        "name": "Veggie Wrap",
        "description": "Fresh veggies wrapped in a tortilla",
        "price": 6.5,
        "category": "entree",
        "ingredients": ["veggies", "tortilla"],
    }
