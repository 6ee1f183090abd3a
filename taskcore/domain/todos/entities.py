# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Todo entities and the inputs that create or change them."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime


@dataclass(slots=True, frozen=True)
class Todo:
    """A single task owned by exactly one user."""

    id: str
    title: str
    completed: bool
    user_id: str
    created_at: datetime
    updated_at: datetime | None = None

    def apply(self, update: TodoUpdate, *, now: datetime) -> Todo:
        """Return a copy with the fields present on ``update`` merged in."""

        changes: dict[str, object] = {"updated_at": now}
        if update.title is not None:
            changes["title"] = update.title
        if update.completed is not None:
            changes["completed"] = update.completed
        return replace(self, **changes)

    def is_owned_by(self, owner_id: str) -> bool:
        return self.user_id == owner_id


@dataclass(slots=True, frozen=True)
class TodoCreate:
    title: str


@dataclass(slots=True, frozen=True)
class TodoUpdate:
    id: str
    title: str | None = None
    completed: bool | None = None

    def is_empty(self) -> bool:
        return self.title is None and self.completed is None


@dataclass(slots=True, frozen=True)
class TodoStats:
    total: int
    active: int
    completed: int

    @classmethod
    def from_todos(cls, todos: list[Todo]) -> TodoStats:
        completed = sum(1 for todo in todos if todo.completed)
        return cls(total=len(todos), active=len(todos) - completed, completed=completed)
