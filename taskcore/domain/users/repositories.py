# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import User, UserCreate, UserUpdate, UserWithPassword


class UserRepository(Protocol):
    async def get_all(self) -> list[User]: ...
    async def get_by_id(self, user_id: str) -> User | None: ...
    async def get_by_email(self, email: str) -> UserWithPassword | None: ...
    async def create(self, data: UserCreate) -> UserWithPassword: ...
    async def update(self, data: UserUpdate) -> User: ...
    async def delete(self, user_id: str) -> None: ...
    async def email_exists(self, email: str) -> bool: ...
    async def username_exists(self, username: str) -> bool: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenGenerator(Protocol):
    def generate(self) -> str: ...
