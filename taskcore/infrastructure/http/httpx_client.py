# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""httpx-backed implementation of the HTTP client port."""

from __future__ import annotations

from collections.abc import Mapping
from types import TracebackType
from typing import Any

import httpx

from taskcore.shared.errors import TransportError
from taskcore.shared.logging import logger

from .interfaces import HttpClientBase, HttpRequest, HttpResponse

_DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class HttpxClient(HttpClientBase):
    """JSON over HTTP through ``httpx.AsyncClient``.

    Any response with status >= 400 raises ``TransportError`` carrying the
    status code; network failures raise it with ``status_code=None``.
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        default_headers: Mapping[str, str] | None = None,
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._default_headers: dict[str, str] = {**_DEFAULT_HEADERS, **(default_headers or {})}
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    @property
    def default_headers(self) -> dict[str, str]:
        return dict(self._default_headers)

    def set_default_header(self, name: str, value: str) -> None:
        self._default_headers[name] = value

    def remove_default_header(self, name: str) -> None:
        self._default_headers.pop(name, None)

    def set_bearer_token(self, token: str | None) -> None:
        if token:
            self.set_default_header("Authorization", f"Bearer {token}")
        else:
            self.remove_default_header("Authorization")

    async def request(self, config: HttpRequest) -> HttpResponse:
        headers = {**self._default_headers, **(config.headers or {})}
        kwargs: dict[str, Any] = {"headers": headers}
        if config.params:
            kwargs["params"] = dict(config.params)
        if config.body is not None:
            kwargs["json"] = config.body

        try:
            response = await self._client.request(config.method, config.url, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning(f"http:{config.method} {config.url} failed error={type(exc).__name__}")
            raise TransportError(
                None, method=config.method, url=config.url, reason=str(exc) or type(exc).__name__
            ) from exc

        if response.status_code >= 400:
            logger.debug(f"http:{config.method} {config.url} -> {response.status_code}")
            raise TransportError(
                response.status_code,
                method=config.method,
                url=config.url,
                reason=response.reason_phrase or None,
            )

        logger.debug(f"http:{config.method} {config.url} -> {response.status_code}")
        return HttpResponse(
            data=_decode(response),
            status=response.status_code,
            headers=dict(response.headers),
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> HttpxClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


__all__ = ["HttpxClient"]
