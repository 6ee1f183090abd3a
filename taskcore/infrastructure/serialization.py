# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Wire and storage records for todos and users.

Records use camelCase keys and ISO-8601 timestamps. Naive timestamps coming
from a store or a remote service are taken to be UTC.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from taskcore.domain.todos import Todo
from taskcore.domain.users import User, UserWithPassword
from taskcore.shared.errors import InfrastructureError


class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_name=True,
        validate_by_alias=True,
        extra="ignore",
    )

    @field_validator("id", "user_id", mode="before", check_fields=False)
    @classmethod
    def _id_as_str(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("created_at", "updated_at", mode="after", check_fields=False)
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


class TodoRecord(_Record):
    id: str
    title: str
    completed: bool = False
    user_id: str
    created_at: datetime
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, todo: Todo) -> TodoRecord:
        return cls(
            id=todo.id,
            title=todo.title,
            completed=todo.completed,
            user_id=todo.user_id,
            created_at=todo.created_at,
            updated_at=todo.updated_at,
        )

    def to_entity(self) -> Todo:
        return Todo(
            id=self.id,
            title=self.title,
            completed=self.completed,
            user_id=self.user_id,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class UserRecord(_Record):
    id: str
    email: str
    username: str
    created_at: datetime
    password_hash: str | None = None

    @classmethod
    def from_entity(cls, user: User) -> UserRecord:
        password_hash = user.password_hash if isinstance(user, UserWithPassword) else None
        return cls(
            id=user.id,
            email=user.email,
            username=user.username,
            created_at=user.created_at,
            password_hash=password_hash,
        )

    def to_user(self) -> User:
        return User(
            id=self.id,
            email=self.email,
            username=self.username,
            created_at=self.created_at,
        )

    def to_user_with_password(self) -> UserWithPassword:
        return UserWithPassword(
            id=self.id,
            email=self.email,
            username=self.username,
            created_at=self.created_at,
            password_hash=self.password_hash or "",
        )


_TODO_LIST = TypeAdapter(list[TodoRecord])
_USER_LIST = TypeAdapter(list[UserRecord])


def _invalid(kind: str, exc: PydanticValidationError) -> InfrastructureError:
    return InfrastructureError(
        "invalid_payload",
        message=f"Malformed {kind} payload",
        context={"errors": exc.error_count()},
    )


def parse_todo(data: Any) -> Todo:
    try:
        return TodoRecord.model_validate(data).to_entity()
    except PydanticValidationError as exc:
        raise _invalid("todo", exc) from exc


def parse_todos(data: Any) -> list[Todo]:
    try:
        return [record.to_entity() for record in _TODO_LIST.validate_python(data)]
    except PydanticValidationError as exc:
        raise _invalid("todo list", exc) from exc


def parse_user_record(data: Any) -> UserRecord:
    try:
        return UserRecord.model_validate(data)
    except PydanticValidationError as exc:
        raise _invalid("user", exc) from exc


def parse_user_records(data: Any) -> list[UserRecord]:
    try:
        return _USER_LIST.validate_python(data)
    except PydanticValidationError as exc:
        raise _invalid("user list", exc) from exc


def dump_todos(todos: list[Todo]) -> str:
    records = [TodoRecord.from_entity(todo) for todo in todos]
    return _TODO_LIST.dump_json(records, by_alias=True).decode("utf-8")


def load_todos(blob: str) -> list[Todo]:
    try:
        return [record.to_entity() for record in _TODO_LIST.validate_json(blob)]
    except PydanticValidationError as exc:
        raise _invalid("stored todo", exc) from exc


def dump_users(users: list[UserWithPassword]) -> str:
    records = [UserRecord.from_entity(user) for user in users]
    return _USER_LIST.dump_json(records, by_alias=True).decode("utf-8")


def load_users(blob: str) -> list[UserWithPassword]:
    try:
        return [record.to_user_with_password() for record in _USER_LIST.validate_json(blob)]
    except PydanticValidationError as exc:
        raise _invalid("stored user", exc) from exc


__all__ = [
    "TodoRecord",
    "UserRecord",
    "dump_todos",
    "dump_users",
    "load_todos",
    "load_users",
    "parse_todo",
    "parse_todos",
    "parse_user_record",
    "parse_user_records",
]
