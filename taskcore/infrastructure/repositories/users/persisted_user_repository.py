# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from taskcore.domain.users import (
    User,
    UserCreate,
    UserNotFoundError,
    UserRepository,
    UserUpdate,
    UserWithPassword,
)
from taskcore.infrastructure.repositories.ids import next_numeric_id
from taskcore.infrastructure.serialization import dump_users, load_users
from taskcore.infrastructure.storage import KeyValueStorage
from taskcore.shared.logging import logger

from .in_memory_user_repository import apply_update, ensure_unique


class PersistedUserRepository(UserRepository):
    """Users (with password hashes) stored as one JSON array under a storage key."""

    def __init__(self, storage: KeyValueStorage, *, key: str = "users") -> None:
        self._storage = storage
        self._key = key

    def _load(self) -> list[UserWithPassword]:
        blob = self._storage.get_item(self._key)
        if not blob:
            return []
        return load_users(blob)

    def _save(self, users: list[UserWithPassword]) -> None:
        self._storage.set_item(self._key, dump_users(users))
        logger.debug(f"users:persist key={self._key} count={len(users)}")

    async def get_all(self) -> list[User]:
        return [user.to_public() for user in self._load()]

    async def get_by_id(self, user_id: str) -> User | None:
        user = next((u for u in self._load() if u.id == user_id), None)
        return user.to_public() if user else None

    async def get_by_email(self, email: str) -> UserWithPassword | None:
        wanted = email.strip().lower()
        return next((u for u in self._load() if u.email.lower() == wanted), None)

    async def create(self, data: UserCreate) -> UserWithPassword:
        users = self._load()
        ensure_unique(users, email=data.email, username=data.username)
        user = UserWithPassword(
            id=next_numeric_id(u.id for u in users),
            email=data.email.strip().lower(),
            username=data.username,
            created_at=datetime.now(UTC),
            password_hash=data.password_hash,
        )
        users.append(user)
        self._save(users)
        return user

    async def update(self, data: UserUpdate) -> User:
        users = self._load()
        for index, user in enumerate(users):
            if user.id == data.id:
                ensure_unique(users, email=data.email, username=data.username, exclude_id=data.id)
                updated = apply_update(user, data)
                users[index] = updated
                self._save(users)
                return updated.to_public()
        raise UserNotFoundError(data.id)

    async def delete(self, user_id: str) -> None:
        users = self._load()
        remaining = [u for u in users if u.id != user_id]
        if len(remaining) == len(users):
            raise UserNotFoundError(user_id)
        self._save(remaining)

    async def email_exists(self, email: str) -> bool:
        return await self.get_by_email(email) is not None

    async def username_exists(self, username: str) -> bool:
        wanted = username.lower()
        return any(u.username.lower() == wanted for u in self._load())
