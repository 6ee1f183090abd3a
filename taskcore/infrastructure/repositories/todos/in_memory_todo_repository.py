# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from taskcore.domain.todos import Todo, TodoCreate, TodoNotFoundError, TodoRepository, TodoUpdate


class InMemoryTodoRepository(TodoRepository):
    """Todos kept in a dict for the lifetime of the instance."""

    def __init__(self, todos: list[Todo] | None = None) -> None:
        self._todos: dict[str, Todo] = {todo.id: todo for todo in todos or []}

    async def get_all(self) -> list[Todo]:
        return list(self._todos.values())

    async def get_all_by_owner(self, owner_id: str) -> list[Todo]:
        return [todo for todo in self._todos.values() if todo.user_id == owner_id]

    async def get_by_id(self, todo_id: str) -> Todo | None:
        return self._todos.get(todo_id)

    async def create(self, data: TodoCreate, owner_id: str) -> Todo:
        todo = Todo(
            id=str(uuid.uuid4()),
            title=data.title,
            completed=False,
            user_id=owner_id,
            created_at=datetime.now(UTC),
        )
        self._todos[todo.id] = todo
        return todo

    async def update(self, data: TodoUpdate) -> Todo:
        existing = self._todos.get(data.id)
        if existing is None:
            raise TodoNotFoundError(data.id)
        updated = existing.apply(data, now=datetime.now(UTC))
        self._todos[updated.id] = updated
        return updated

    async def delete(self, todo_id: str) -> None:
        if self._todos.pop(todo_id, None) is None:
            raise TodoNotFoundError(todo_id)
