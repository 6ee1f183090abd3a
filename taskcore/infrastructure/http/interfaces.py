# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal, Protocol

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]


@dataclass(slots=True, frozen=True)
class HttpRequest:
    method: HttpMethod
    url: str
    headers: Mapping[str, str] | None = None
    params: Mapping[str, str] | None = None
    body: Any = None


@dataclass(slots=True, frozen=True)
class HttpResponse:
    data: Any
    status: int
    headers: Mapping[str, str] = field(default_factory=dict)


class HttpClient(Protocol):
    async def request(self, config: HttpRequest) -> HttpResponse: ...

    async def get(self, url: str, params: Mapping[str, str] | None = None) -> HttpResponse: ...

    async def post(self, url: str, body: Any = None) -> HttpResponse: ...

    async def put(self, url: str, body: Any = None) -> HttpResponse: ...

    async def patch(self, url: str, body: Any = None) -> HttpResponse: ...

    async def delete(self, url: str) -> HttpResponse: ...


class HttpClientBase:
    """Derives the verb helpers from ``request``; subclasses implement only that."""

    async def request(self, config: HttpRequest) -> HttpResponse:
        raise NotImplementedError

    async def get(self, url: str, params: Mapping[str, str] | None = None) -> HttpResponse:
        return await self.request(HttpRequest(method="GET", url=url, params=params))

    async def post(self, url: str, body: Any = None) -> HttpResponse:
        return await self.request(HttpRequest(method="POST", url=url, body=body))

    async def put(self, url: str, body: Any = None) -> HttpResponse:
        return await self.request(HttpRequest(method="PUT", url=url, body=body))

    async def patch(self, url: str, body: Any = None) -> HttpResponse:
        return await self.request(HttpRequest(method="PATCH", url=url, body=body))

    async def delete(self, url: str) -> HttpResponse:
        return await self.request(HttpRequest(method="DELETE", url=url))
