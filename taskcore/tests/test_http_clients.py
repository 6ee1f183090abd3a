from __future__ import annotations

import asyncio

import httpx
import pytest

from taskcore.infrastructure.http import (
    CircuitBreaker,
    CircuitOpenError,
    HttpClientBase,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    ResilientHttpClient,
)
from taskcore.shared.config import ResilienceConfig
from taskcore.shared.errors import TransportError


def test_httpx_client_merges_headers_and_decodes_json() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True}, headers={"X-Trace": "abc"})

    client = HttpxClient("http://api.test", transport=httpx.MockTransport(handler))
    client.set_bearer_token("tok")

    response = asyncio.run(
        client.request(HttpRequest(method="GET", url="/ping", headers={"X-Extra": "1"}))
    )

    assert response.data == {"ok": True}
    assert response.status == 200
    assert response.headers["x-trace"] == "abc"
    assert seen[0].headers["authorization"] == "Bearer tok"
    assert seen[0].headers["x-extra"] == "1"
    assert seen[0].headers["accept"] == "application/json"

    client.set_bearer_token(None)
    assert "Authorization" not in client.default_headers


def test_httpx_client_raises_on_error_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, text="missing")

    client = HttpxClient("http://api.test", transport=httpx.MockTransport(handler))

    with pytest.raises(TransportError) as exc_info:
        asyncio.run(client.get("/todos/1"))

    assert exc_info.value.status_code == 404
    assert exc_info.value.is_not_found
    assert str(exc_info.value).startswith("HTTP 404")


def test_httpx_client_wraps_network_failures() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    client = HttpxClient("http://api.test", transport=httpx.MockTransport(handler))

    with pytest.raises(TransportError) as exc_info:
        asyncio.run(client.post("/todos", {"title": "x"}))

    assert exc_info.value.status_code is None


def test_httpx_client_empty_and_text_bodies() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "DELETE":
            return httpx.Response(204)
        return httpx.Response(200, text="plain")

    client = HttpxClient("http://api.test", transport=httpx.MockTransport(handler))

    assert asyncio.run(client.delete("/todos/1")).data is None
    assert asyncio.run(client.get("/text")).data == "plain"


class FlakyClient(HttpClientBase):
    def __init__(self, failures: list[int | None]) -> None:
        self._failures = list(failures)
        self.calls = 0

    async def request(self, config: HttpRequest) -> HttpResponse:
        self.calls += 1
        if self._failures:
            raise TransportError(self._failures.pop(0), method=config.method, url=config.url)
        return HttpResponse(data={"ok": True}, status=200)


def test_resilient_client_retries_transient_failures() -> None:
    inner = FlakyClient([503, None])
    client = ResilientHttpClient(inner, max_retries=3, backoff_base=0)

    response = asyncio.run(client.get("/todos"))

    assert response.data == {"ok": True}
    assert inner.calls == 3
    assert client.breaker.is_open is False


def test_resilient_client_does_not_retry_client_errors() -> None:
    inner = FlakyClient([404])
    client = ResilientHttpClient(inner, max_retries=3, backoff_base=0)

    with pytest.raises(TransportError) as exc_info:
        asyncio.run(client.get("/todos/1"))

    assert exc_info.value.status_code == 404
    assert inner.calls == 1


def test_resilient_client_gives_up_after_max_retries() -> None:
    inner = FlakyClient([500, 500, 500])
    client = ResilientHttpClient(inner, max_retries=1, backoff_base=0)

    with pytest.raises(TransportError):
        asyncio.run(client.get("/todos"))

    assert inner.calls == 2


def test_circuit_opens_after_threshold() -> None:
    inner = FlakyClient([500])
    client = ResilientHttpClient(
        inner,
        max_retries=0,
        backoff_base=0,
        breaker=CircuitBreaker(failure_threshold=1, reset_timeout=3600),
    )

    with pytest.raises(TransportError):
        asyncio.run(client.get("/todos"))
    with pytest.raises(CircuitOpenError):
        asyncio.run(client.get("/todos"))

    assert inner.calls == 1
    assert client.breaker.is_open is True


def test_resilient_client_from_config() -> None:
    config = ResilienceConfig(max_retries=0, circuit_fail_threshold=2, circuit_reset_timeout=5)
    client = ResilientHttpClient.from_config(FlakyClient([]), config)

    assert client.breaker.failure_threshold == 2
    assert client.breaker.reset_timeout == 5


@pytest.mark.parametrize("method", ["post", "patch"])
def test_resilient_client_sends_writes_once(method: str) -> None:
    inner = FlakyClient([502, None])
    client = ResilientHttpClient(inner, max_retries=3, backoff_base=0)

    with pytest.raises(TransportError):
        asyncio.run(getattr(client, method)("/todos", {"title": "x"}))

    assert inner.calls == 1


def test_resilient_client_retries_put_and_delete() -> None:
    inner = FlakyClient([503, 503])
    client = ResilientHttpClient(inner, max_retries=3, backoff_base=0)

    asyncio.run(client.put("/todos/1", {"title": "x"}))
    asyncio.run(client.delete("/todos/1"))

    assert inner.calls == 4
