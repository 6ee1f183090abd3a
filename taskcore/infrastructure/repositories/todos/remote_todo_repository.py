# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from taskcore.domain.todos import Todo, TodoCreate, TodoNotFoundError, TodoRepository, TodoUpdate
from taskcore.infrastructure.http import HttpClient
from taskcore.infrastructure.serialization import parse_todo, parse_todos
from taskcore.shared.errors import TransportError


class RemoteTodoRepository(TodoRepository):
    """Todos behind a REST endpoint reached through the HTTP client port.

    ``GET /todos[?userId=]``, ``GET/PATCH/DELETE /todos/{id}``, ``POST /todos``.
    """

    def __init__(self, http: HttpClient, *, endpoint: str = "/todos") -> None:
        self._http = http
        self._endpoint = endpoint.rstrip("/")

    def _item_url(self, todo_id: str) -> str:
        return f"{self._endpoint}/{quote(todo_id, safe='')}"

    async def get_all(self) -> list[Todo]:
        response = await self._http.get(self._endpoint)
        return parse_todos(response.data or [])

    async def get_all_by_owner(self, owner_id: str) -> list[Todo]:
        response = await self._http.get(self._endpoint, {"userId": owner_id})
        return parse_todos(response.data or [])

    async def get_by_id(self, todo_id: str) -> Todo | None:
        try:
            response = await self._http.get(self._item_url(todo_id))
        except TransportError as exc:
            if exc.is_not_found:
                return None
            raise
        if response.data is None:
            return None
        return parse_todo(response.data)

    async def create(self, data: TodoCreate, owner_id: str) -> Todo:
        response = await self._http.post(self._endpoint, {"title": data.title, "userId": owner_id})
        return parse_todo(response.data)

    async def update(self, data: TodoUpdate) -> Todo:
        body: dict[str, Any] = {}
        if data.title is not None:
            body["title"] = data.title
        if data.completed is not None:
            body["completed"] = data.completed
        try:
            response = await self._http.patch(self._item_url(data.id), body)
        except TransportError as exc:
            if exc.is_not_found:
                raise TodoNotFoundError(data.id) from exc
            raise
        return parse_todo(response.data)

    async def delete(self, todo_id: str) -> None:
        try:
            await self._http.delete(self._item_url(todo_id))
        except TransportError as exc:
            if exc.is_not_found:
                raise TodoNotFoundError(todo_id) from exc
            raise
