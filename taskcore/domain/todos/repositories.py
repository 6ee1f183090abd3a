# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Todo, TodoCreate, TodoUpdate


class TodoRepository(Protocol):
    async def get_all(self) -> list[Todo]: ...
    async def get_all_by_owner(self, owner_id: str) -> list[Todo]: ...
    async def get_by_id(self, todo_id: str) -> Todo | None: ...
    async def create(self, data: TodoCreate, owner_id: str) -> Todo: ...
    async def update(self, data: TodoUpdate) -> Todo: ...
    async def delete(self, todo_id: str) -> None: ...
