from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from menu_api.menu.store import MenuStore

NOT_FOUND = {"error": "Menu item not found"}


def test_list_returns_seed_menu(client: TestClient) -> None:
    response = client.get("/api/menu")

    assert response.status_code == 200
    data = response.json()
    assert [item["id"] for item in data] == [1, 2, 3, 4, 5, 6, 7, 8]
    assert set(data[0]) == {
        "id",
        "name",
        "description",
        "price",
        "category",
        "ingredients",
        "available",
    }


def test_get_returns_single_item(client: TestClient) -> None:
    response = client.get("/api/menu/1")

    assert response.status_code == 200
    assert response.json() == {
        "id": 1,
        "name": "Classic Burger",
        "description": "Juicy beef patty with fresh toppings",
        "price": 12.99,
        "category": "entree",
        "ingredients": ["beef", "lettuce", "tomato", "cheese"],
        "available": True,
    }


def test_seed_item_without_availability_defaults_to_available(client: TestClient) -> None:
    assert client.get("/api/menu/8").json()["available"] is True


def test_create_get_delete_scenario(client: TestClient, veggie_wrap: dict[str, object]) -> None:
    created = client.post("/api/menu", json=veggie_wrap)

    assert created.status_code == 201
    body = created.json()
    assert body["id"] == 9
    assert body["available"] is True

    fetched = client.get("/api/menu/9")
    assert fetched.status_code == 200
    assert fetched.json() == body

    deleted = client.delete("/api/menu/9")
    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Successfully deleted"}

    gone = client.get("/api/menu/9")
    assert gone.status_code == 404
    assert gone.json() == NOT_FOUND


def test_create_round_trip_preserves_payload(
    client: TestClient, veggie_wrap: dict[str, object]
) -> None:
    payload = {**veggie_wrap, "available": False}
    created = client.post("/api/menu", json=payload).json()

    fetched = client.get(f"/api/menu/{created['id']}").json()

    assert fetched == {**payload, "id": created["id"]}


def test_create_id_exceeds_every_existing_id(
    client: TestClient, store: MenuStore, veggie_wrap: dict[str, object]
) -> None:
    client.delete("/api/menu/2")
    client.delete("/api/menu/8")
    before = {item.id for item in store.list_all()}

    created = client.post("/api/menu", json=veggie_wrap)

    assert created.status_code == 201
    assert created.json()["id"] > max(before)


def test_create_validation_failure_leaves_store_untouched(
    client: TestClient, store: MenuStore
) -> None:
    response = client.post("/api/menu", json={"name": "ab", "price": 0})

    assert response.status_code == 400
    data = response.json()
    assert data["status"] == "Validation Error"
    assert {error["field"] for error in data["errors"]} == {
        "name",
        "description",
        "price",
        "category",
        "ingredients",
    }
    assert all(set(error) == {"field", "message"} for error in data["errors"])
    assert len(store) == 8


def test_update_replaces_item(client: TestClient, veggie_wrap: dict[str, object]) -> None:
    response = client.put("/api/menu/3", json=veggie_wrap)

    assert response.status_code == 200
    assert response.json() == {**veggie_wrap, "id": 3, "available": True}
    assert client.get("/api/menu/3").json()["name"] == "Veggie Wrap"


def test_update_with_negative_price_is_rejected(client: TestClient) -> None:
    item = client.get("/api/menu/3").json()
    item.pop("id")
    item["price"] = -5

    response = client.put("/api/menu/3", json=item)

    assert response.status_code == 400
    assert [error["field"] for error in response.json()["errors"]] == ["price"]
    assert client.get("/api/menu/3").json()["price"] == 8.99


def test_update_validates_before_looking_up_id(client: TestClient) -> None:
    response = client.put("/api/menu/999", json={"price": -5})

    assert response.status_code == 400


def test_update_unknown_id_with_valid_payload(
    client: TestClient, veggie_wrap: dict[str, object]
) -> None:
    response = client.put("/api/menu/999", json=veggie_wrap)

    assert response.status_code == 404
    assert response.json() == NOT_FOUND


@pytest.mark.parametrize("method", ["get", "delete"])
@pytest.mark.parametrize("item_id", ["999", "0", "-1", "abc", "\u0663"])
def test_unknown_or_malformed_ids_are_not_found(
    client: TestClient, method: str, item_id: str
) -> None:
    response = getattr(client, method)(f"/api/menu/{item_id}")

    assert response.status_code == 404
    assert response.json() == NOT_FOUND


def test_put_with_malformed_id_is_not_found(
    client: TestClient, veggie_wrap: dict[str, object]
) -> None:
    response = client.put("/api/menu/abc", json=veggie_wrap)

    assert response.status_code == 404
    assert response.json() == NOT_FOUND


def test_delete_twice_returns_not_found(client: TestClient) -> None:
    assert client.delete("/api/menu/4").status_code == 200

    second = client.delete("/api/menu/4")

    assert second.status_code == 404
    assert second.json() == NOT_FOUND


def test_markup_in_text_is_escaped(client: TestClient, veggie_wrap: dict[str, object]) -> None:
    payload = {**veggie_wrap, "name": "  <i>Wrap</i>  "}

    response = client.post("/api/menu", json=payload)

    assert response.status_code == 201
    assert response.json()["name"] == "&lt;i&gt;Wrap&lt;/i&gt;"


def test_clients_do_not_share_state(veggie_wrap: dict[str, object]) -> None:
    from menu_api.main import create_app

    first = TestClient(create_app(MenuStore.seeded()))
    second = TestClient(create_app(MenuStore.seeded()))

    first.post("/api/menu", json=veggie_wrap)

    assert len(first.get("/api/menu").json()) == 9
    assert len(second.get("/api/menu").json()) == 8


def test_empty_store_lists_nothing_and_starts_ids_at_one(
    veggie_wrap: dict[str, object],
) -> None:
    from menu_api.main import create_app

    client = TestClient(create_app(MenuStore()))

    assert client.get("/api/menu").json() == []
    assert client.post("/api/menu", json=veggie_wrap).json()["id"] == 1


@pytest.mark.parametrize(("raw_id", "expected"), [("3abc", 3), ("1.5", 1), ("+2", 2)])
def test_id_uses_leading_integer_of_path_segment(
    client: TestClient, raw_id: str, expected: int
) -> None:
    response = client.get(f"/api/menu/{raw_id}")

    assert response.status_code == 200
    assert response.json()["id"] == expected


def test_huge_price_is_a_validation_error(
    client: TestClient, store: MenuStore, veggie_wrap: dict[str, object]
) -> None:
    response = client.post("/api/menu", json={**veggie_wrap, "price": 10**400})

    assert response.status_code == 400
    assert [error["field"] for error in response.json()["errors"]] == ["price"]
    assert len(store) == 8
