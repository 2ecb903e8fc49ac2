"""
tests.test_orders_api

Order service HTTP surface, with the user service either mounted in-process
or replaced by a transport that fails or answers with errors.
"""

from __future__ import annotations

import httpx
import pytest

from registry_services.api.app import create_order_app, create_user_app
from registry_services.settings import Settings


def _order_client(sibling: httpx.AsyncClient) -> httpx.AsyncClient:
    app = create_order_app(settings=Settings(env="test"), http=sibling)
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")


def _in_process_user_service() -> httpx.AsyncClient:
    user_app = create_user_app(settings=Settings(env="test"))
    return httpx.AsyncClient(
        transport=httpx.ASGITransport(app=user_app), base_url="http://user-service"
    )


def _sibling(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://user-service")


def _unreachable(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


@pytest.mark.asyncio
async def test_get_order_enriched_from_user_service() -> None:
    async with _in_process_user_service() as users, _order_client(users) as client:
        r = await client.get("/orders/1")

    assert r.status_code == 200
    body = r.json()
    assert body["id"] == 1
    assert body["product"] == "Laptop"
    assert body["price"] == 999.99
    assert body["status"] == "pending"
    assert body["user_name"] == "John Doe"
    assert body["user_email"] == "john@example.com"


@pytest.mark.asyncio
async def test_get_order_with_unreachable_user_service_uses_placeholder() -> None:
    async with _sibling(_unreachable) as users, _order_client(users) as client:
        r = await client.post(
            "/orders",
            json={"user_id": 7, "product": "Chair", "quantity": 4, "price": 60.0},
        )
        assert r.status_code == 201
        order_id = r.json()["id"]

        r = await client.get(f"/orders/{order_id}")

    assert r.status_code == 200
    assert r.json()["user_name"] == "User 7"
    assert r.json()["user_email"] == "user7@example.com"


@pytest.mark.asyncio
async def test_get_order_with_failing_user_service_omits_user_fields() -> None:
    failing = _sibling(lambda request: httpx.Response(500))
    async with failing as users, _order_client(users) as client:
        r = await client.get("/orders/2")

    assert r.status_code == 200
    body = r.json()
    assert body["product"] == "Mouse"
    assert "user_name" not in body
    assert "user_email" not in body


@pytest.mark.asyncio
async def test_get_order_for_unknown_user_omits_user_fields() -> None:
    async with _in_process_user_service() as users, _order_client(users) as client:
        r = await client.post(
            "/orders",
            json={"user_id": 99, "product": "Desk", "quantity": 1, "price": 150.0},
        )
        r = await client.get(f"/orders/{r.json()['id']}")

    assert r.status_code == 200
    assert "user_name" not in r.json()


@pytest.mark.asyncio
async def test_get_unknown_order_is_404() -> None:
    async with _sibling(_unreachable) as users, _order_client(users) as client:
        r = await client.get("/orders/999")

    assert r.status_code == 404
    assert r.json() == {"error": "Order not found"}


@pytest.mark.asyncio
async def test_non_integer_order_id_is_400() -> None:
    async with _sibling(_unreachable) as users, _order_client(users) as client:
        r = await client.get("/orders/abc")

    assert r.status_code == 400
    assert r.json() == {"error": "Invalid order ID"}


@pytest.mark.asyncio
async def test_create_order_returns_201_with_pending_status() -> None:
    async with _sibling(_unreachable) as users, _order_client(users) as client:
        r = await client.post(
            "/orders",
            json={"user_id": 3, "product": "Keyboard", "quantity": 2, "price": 49.5},
        )

    assert r.status_code == 201
    body = r.json()
    assert body["id"] == 3
    assert body["status"] == "pending"
    assert body["created"]
    assert "user_name" not in body


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"user_id": 1, "product": "Keyboard", "quantity": 0, "price": 49.5},
        {"user_id": 1, "product": "Keyboard", "quantity": 1, "price": 0},
        {"user_id": 1, "product": "", "quantity": 1, "price": 49.5},
        {"user_id": 0, "product": "Keyboard", "quantity": 1, "price": 49.5},
        {"product": "Keyboard", "quantity": 1, "price": 49.5},
    ],
)
async def test_create_order_rejects_invalid_fields(payload: dict) -> None:
    async with _sibling(_unreachable) as users, _order_client(users) as client:
        r = await client.post("/orders", json=payload)
        assert r.status_code == 400
        assert r.json() == {"error": "All fields are required and must be valid"}

        # The counter did not move: the next valid order still gets id 3.
        r = await client.post(
            "/orders",
            json={"user_id": 1, "product": "Keyboard", "quantity": 1, "price": 49.5},
        )
        assert r.json()["id"] == 3


@pytest.mark.asyncio
async def test_create_order_with_malformed_body_is_400() -> None:
    async with _sibling(_unreachable) as users, _order_client(users) as client:
        r = await client.post(
            "/orders", content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert r.status_code == 400
        assert r.json() == {"error": "Invalid JSON"}

        r = await client.post("/orders", json={"user_id": "one", "product": "x"})
        assert r.status_code == 400
        assert r.json() == {"error": "Invalid JSON"}


@pytest.mark.asyncio
async def test_list_orders_all_and_by_user() -> None:
    async with _sibling(_unreachable) as users, _order_client(users) as client:
        await client.post(
            "/orders",
            json={"user_id": 1, "product": "Dock", "quantity": 1, "price": 80.0},
        )

        r = await client.get("/orders")
        assert r.status_code == 200
        assert {o["id"] for o in r.json()} == {1, 2, 3}

        r = await client.get("/orders", params={"user_id": 1})
        assert sorted(o["product"] for o in r.json()) == ["Dock", "Laptop"]

        r = await client.get("/orders", params={"user_id": 77})
        assert r.json() == []

        r = await client.get("/orders", params={"user_id": "abc"})
        assert r.status_code == 400
        assert r.json() == {"error": "Invalid user ID"}


@pytest.mark.asyncio
async def test_update_status_flow() -> None:
    async with _sibling(_unreachable) as users, _order_client(users) as client:
        r = await client.put("/orders/1/status", json={"status": "delivered"})
        assert r.status_code == 200
        assert r.json() == {"status": "updated"}

        r = await client.get("/orders/1")
        assert r.json()["status"] == "delivered"

        r = await client.put("/orders/1/status", json={"status": "Delivered"})
        assert r.status_code == 400
        assert r.json() == {"error": "Invalid status"}

        r = await client.put("/orders/1/status", json={})
        assert r.status_code == 400

        r = await client.put("/orders/404/status", json={"status": "shipped"})
        assert r.status_code == 404
        assert r.json() == {"error": "Order not found"}

        r = await client.get("/orders/1")
        assert r.json()["status"] == "delivered"


@pytest.mark.asyncio
async def test_get_order_with_undecodable_user_response_omits_user_fields() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, headers={"content-encoding": "gzip"}, content=b"not gzip")

    async with _sibling(handler) as users, _order_client(users) as client:
        r = await client.get("/orders/1")

    assert r.status_code == 200
    body = r.json()
    assert body["product"] == "Laptop"
    assert "user_name" not in body
    assert "user_email" not in body


@pytest.mark.asyncio
@pytest.mark.parametrize("price", [b"1e400", b"-1e400"])
async def test_create_order_rejects_non_finite_price(price: bytes) -> None:
    body = b'{"user_id": 1, "product": "Lamp", "quantity": 1, "price": ' + price + b"}"
    async with _sibling(_unreachable) as users, _order_client(users) as client:
        r = await client.post(
            "/orders", content=body, headers={"Content-Type": "application/json"}
        )
        assert r.status_code == 400

        r = await client.get("/orders")
        assert {o["id"] for o in r.json()} == {1, 2}

        r = await client.post(
            "/orders",
            json={"user_id": 1, "product": "Lamp", "quantity": 1, "price": 12.0},
        )
        assert r.json()["id"] == 3


@pytest.mark.asyncio
async def test_empty_user_filter_lists_everything() -> None:
    async with _sibling(_unreachable) as users, _order_client(users) as client:
        r = await client.get("/orders?user_id=")
        assert r.status_code == 200
        assert {o["id"] for o in r.json()} == {1, 2}

        r = await client.get("/orders", params={"user_id": "2"})
        assert [o["id"] for o in r.json()] == [2]

        r = await client.get("/orders", params={"user_id": "1.5"})
        assert r.status_code == 400
        assert r.json() == {"error": "Invalid user ID"}
