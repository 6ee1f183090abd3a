# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from collections.abc import Iterable
from dataclasses import replace
from datetime import UTC, datetime

from taskcore.domain.users import (
    DuplicateEmailError,
    DuplicateUsernameError,
    User,
    UserCreate,
    UserNotFoundError,
    UserRepository,
    UserUpdate,
    UserWithPassword,
)


def ensure_unique(
    users: Iterable[UserWithPassword],
    *,
    email: str | None = None,
    username: str | None = None,
    exclude_id: str | None = None,
) -> None:
    for user in users:
        if user.id == exclude_id:
            continue
        if email is not None and user.email.lower() == email.lower():
            raise DuplicateEmailError()
        if username is not None and user.username.lower() == username.lower():
            raise DuplicateUsernameError()


def apply_update(user: UserWithPassword, data: UserUpdate) -> UserWithPassword:
    changes: dict[str, str] = {}
    if data.email is not None:
        changes["email"] = data.email.strip().lower()
    if data.username is not None:
        changes["username"] = data.username
    if data.password_hash is not None:
        changes["password_hash"] = data.password_hash
    return replace(user, **changes)


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, UserWithPassword] = {}

    async def get_all(self) -> list[User]:
        return [user.to_public() for user in self._users.values()]

    async def get_by_id(self, user_id: str) -> User | None:
        user = self._users.get(user_id)
        return user.to_public() if user else None

    async def get_by_email(self, email: str) -> UserWithPassword | None:
        wanted = email.strip().lower()
        return next((u for u in self._users.values() if u.email.lower() == wanted), None)

    async def create(self, data: UserCreate) -> UserWithPassword:
        ensure_unique(self._users.values(), email=data.email, username=data.username)
        user = UserWithPassword(
            id=str(uuid.uuid4()),
            email=data.email.strip().lower(),
            username=data.username,
            created_at=datetime.now(UTC),
            password_hash=data.password_hash,
        )
        self._users[user.id] = user
        return user

    async def update(self, data: UserUpdate) -> User:
        existing = self._users.get(data.id)
        if existing is None:
            raise UserNotFoundError(data.id)
        ensure_unique(
            self._users.values(),
            email=data.email,
            username=data.username,
            exclude_id=data.id,
        )
        updated = apply_update(existing, data)
        self._users[updated.id] = updated
        return updated.to_public()

    async def delete(self, user_id: str) -> None:
        if self._users.pop(user_id, None) is None:
            raise UserNotFoundError(user_id)

    async def email_exists(self, email: str) -> bool:
        wanted = email.strip().lower()
        return any(u.email.lower() == wanted for u in self._users.values())

    async def username_exists(self, username: str) -> bool:
        wanted = username.lower()
        return any(u.username.lower() == wanted for u in self._users.values())
