"""
tests.test_user_directory

User lookups from the order service: success, placeholder on transport failure,
and "unavailable" on error statuses or undecodable bodies.
"""

from __future__ import annotations

import httpx
import pytest

from registry_services.clients.user_directory import (
    Enriched,
    Unavailable,
    UserDirectoryClient,
    placeholder_user,
)
from registry_services.domain.models import UserSummary


def _http(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://users")


@pytest.mark.asyncio
async def test_success_decodes_user() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        return httpx.Response(
            200,
            json={"id": 2, "name": "Jane Smith", "email": "jane@example.com", "created": "x"},
        )

    async with _http(handler) as http:
        result = await UserDirectoryClient(http=http).lookup(2)

    assert seen == ["/users/2"]
    assert result == Enriched(user=UserSummary(id=2, name="Jane Smith", email="jane@example.com"))


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "exc_type,message",
    [
        (httpx.ConnectError, "connection refused"),
        (httpx.ConnectError, "name resolution failed"),
        (httpx.ConnectTimeout, "connect timed out"),
        (httpx.ReadTimeout, "read timed out"),
    ],
)
async def test_transport_failure_synthesizes_placeholder(
    exc_type: type[httpx.TransportError], message: str
) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise exc_type(message, request=request)

    async with _http(handler) as http:
        result = await UserDirectoryClient(http=http).lookup(7)

    assert isinstance(result, Enriched)
    assert result.synthesized is True
    assert result.user == UserSummary(id=7, name="User 7", email="user7@example.com")


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [404, 500, 503, 302])
async def test_error_status_is_unavailable(status: int) -> None:
    async with _http(lambda request: httpx.Response(status)) as http:
        result = await UserDirectoryClient(http=http).lookup(1)

    assert isinstance(result, Unavailable)
    assert str(status) in result.reason


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [b"not json", b"[]", b'{"id": 1}', b'{"id": "one", "name": "A", "email": "a@b"}'],
)
async def test_undecodable_body_is_unavailable(body: bytes) -> None:
    async with _http(lambda request: httpx.Response(200, content=body)) as http:
        result = await UserDirectoryClient(http=http).lookup(1)

    assert isinstance(result, Unavailable)


@pytest.mark.asyncio
async def test_broken_content_encoding_is_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, headers={"content-encoding": "gzip"}, content=b"not gzip")

    async with _http(handler) as http:
        result = await UserDirectoryClient(http=http).lookup(1)

    assert isinstance(result, Unavailable)
    assert "undecodable" in result.reason


@pytest.mark.asyncio
async def test_lookup_is_bounded_by_the_configured_timeout() -> None:
    timeouts: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        timeouts.append(request.extensions["timeout"])
        return httpx.Response(200, json={"id": 1, "name": "John Doe", "email": "john@example.com"})

    async with _http(handler) as http:
        await UserDirectoryClient(http=http, timeout_seconds=5.0).lookup(1)

    assert timeouts == [{"connect": 5.0, "read": 5.0, "write": 5.0, "pool": 5.0}]


def test_placeholder_is_derived_from_the_id() -> None:
    assert placeholder_user(42) == UserSummary(id=42, name="User 42", email="user42@example.com")
