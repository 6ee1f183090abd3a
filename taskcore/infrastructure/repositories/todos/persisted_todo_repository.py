# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from taskcore.domain.todos import Todo, TodoCreate, TodoNotFoundError, TodoRepository, TodoUpdate
from taskcore.infrastructure.repositories.ids import next_numeric_id
from taskcore.infrastructure.serialization import dump_todos, load_todos
from taskcore.infrastructure.storage import KeyValueStorage
from taskcore.shared.logging import logger


class PersistedTodoRepository(TodoRepository):
    """Todos stored as one JSON array under a single storage key.

    The whole collection is read back on every call and written out in full
    on every change, so several instances over the same storage stay in step.
    """

    def __init__(self, storage: KeyValueStorage, *, key: str = "todos") -> None:
        self._storage = storage
        self._key = key

    def _load(self) -> list[Todo]:
        blob = self._storage.get_item(self._key)
        if not blob:
            return []
        return load_todos(blob)

    def _save(self, todos: list[Todo]) -> None:
        self._storage.set_item(self._key, dump_todos(todos))
        logger.debug(f"todos:persist key={self._key} count={len(todos)}")

    async def get_all(self) -> list[Todo]:
        return self._load()

    async def get_all_by_owner(self, owner_id: str) -> list[Todo]:
        return [todo for todo in self._load() if todo.user_id == owner_id]

    async def get_by_id(self, todo_id: str) -> Todo | None:
        return next((todo for todo in self._load() if todo.id == todo_id), None)

    async def create(self, data: TodoCreate, owner_id: str) -> Todo:
        todos = self._load()
        now = datetime.now(UTC)
        todo = Todo(
            id=next_numeric_id(item.id for item in todos),
            title=data.title,
            completed=False,
            user_id=owner_id,
            created_at=now,
            updated_at=now,
        )
        todos.append(todo)
        self._save(todos)
        return todo

    async def update(self, data: TodoUpdate) -> Todo:
        todos = self._load()
        for index, todo in enumerate(todos):
            if todo.id == data.id:
                updated = todo.apply(data, now=datetime.now(UTC))
                todos[index] = updated
                self._save(todos)
                return updated
        raise TodoNotFoundError(data.id)

    async def delete(self, todo_id: str) -> None:
        todos = self._load()
        remaining = [todo for todo in todos if todo.id != todo_id]
        if len(remaining) == len(todos):
            raise TodoNotFoundError(todo_id)
        self._save(remaining)
