# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Todo management rules: validation and ownership on top of a TodoRepository."""

from __future__ import annotations

from dataclasses import replace

from taskcore.domain.todos import (
    Todo,
    TodoCreate,
    TodoNotFoundError,
    TodoRepository,
    TodoStats,
    TodoUpdate,
)
from taskcore.shared.errors import (
    AuthenticationRequiredError,
    UnauthorizedError,
    ValidationError,
)
from taskcore.shared.logging import logger


def _clean_title(title: str | None) -> str:
    if title is None or not title.strip():
        raise ValidationError("Todo title cannot be empty", field="title")
    return title.strip()


class TodoUseCases:
    """Stateless facade over a todo repository.

    Every method that takes an ``owner_id`` enforces ownership when one is
    given. Calls without an owner id act on the whole store and are meant for
    trusted callers only.
    """

    def __init__(self, *, todos: TodoRepository) -> None:
        self._todos = todos

    async def get_all_todos(self, owner_id: str | None = None) -> list[Todo]:
        if owner_id:
            return await self._todos.get_all_by_owner(owner_id)
        return await self._todos.get_all()

    async def get_todo_by_id(self, todo_id: str, owner_id: str | None = None) -> Todo | None:
        todo = await self._todos.get_by_id(todo_id)
        if todo is not None and owner_id and not todo.is_owned_by(owner_id):
            logger.warning(f"todos:read denied id={todo_id} owner={owner_id}")
            raise UnauthorizedError(
                "Unauthorized: You do not have access to this todo",
                context={"todo_id": todo_id},
            )
        return todo

    async def create_todo(self, data: TodoCreate, owner_id: str | None) -> Todo:
        if not owner_id:
            raise AuthenticationRequiredError("Authentication required to create todos")
        title = _clean_title(data.title)

        todo = await self._todos.create(TodoCreate(title=title), owner_id)
        logger.info(f"todos:create id={todo.id} owner={owner_id}")
        return todo

    async def update_todo(self, data: TodoUpdate, owner_id: str | None = None) -> Todo:
        if data.title is not None:
            data = replace(data, title=_clean_title(data.title))

        existing = await self._require(data.id)
        self._check_owner(existing, owner_id, action="update")

        todo = await self._todos.update(data)
        logger.info(f"todos:update id={todo.id}")
        return todo

    async def toggle_todo(self, todo_id: str, owner_id: str | None = None) -> Todo:
        existing = await self._require(todo_id)
        self._check_owner(existing, owner_id, action="toggle")

        todo = await self._todos.update(TodoUpdate(id=todo_id, completed=not existing.completed))
        logger.info(f"todos:toggle id={todo_id} completed={todo.completed}")
        return todo

    async def delete_todo(self, todo_id: str, owner_id: str | None = None) -> None:
        existing = await self._require(todo_id)
        self._check_owner(existing, owner_id, action="delete")

        await self._todos.delete(todo_id)
        logger.info(f"todos:delete id={todo_id}")

    async def get_active_todos(self, owner_id: str | None = None) -> list[Todo]:
        return [todo for todo in await self.get_all_todos(owner_id) if not todo.completed]

    async def get_completed_todos(self, owner_id: str | None = None) -> list[Todo]:
        return [todo for todo in await self.get_all_todos(owner_id) if todo.completed]

    async def get_active_todos_count(self, owner_id: str | None = None) -> int:
        return len(await self.get_active_todos(owner_id))

    async def get_completed_todos_count(self, owner_id: str | None = None) -> int:
        return len(await self.get_completed_todos(owner_id))

    async def get_stats(self, owner_id: str | None = None) -> TodoStats:
        return TodoStats.from_todos(await self.get_all_todos(owner_id))

    async def clear_completed(self, owner_id: str | None = None) -> int:
        """Delete every completed todo in scope and return how many were removed."""

        completed = await self.get_completed_todos(owner_id)
        for todo in completed:
            await self._todos.delete(todo.id)
        if completed:
            logger.info(f"todos:clear_completed removed={len(completed)} owner={owner_id or '*'}")
        return len(completed)

    async def _require(self, todo_id: str) -> Todo:
        todo = await self._todos.get_by_id(todo_id)
        if todo is None:
            raise TodoNotFoundError(todo_id)
        return todo

    @staticmethod
    def _check_owner(todo: Todo, owner_id: str | None, *, action: str) -> None:
        if owner_id and not todo.is_owned_by(owner_id):
            logger.warning(f"todos:{action} denied id={todo.id} owner={owner_id}")
            raise UnauthorizedError(
                f"Unauthorized: You can only {action} your own todos",
                context={"todo_id": todo.id},
            )


__all__ = ["TodoUseCases"]
