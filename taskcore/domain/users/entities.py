# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: str
    email: str
    username: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class UserWithPassword(User):

    password_hash: str

    def to_public(self) -> User:
        return User(
            id=self.id,
            email=self.email,
            username=self.username,
            created_at=self.created_at,
        )


@dataclass(slots=True, frozen=True)
class AuthSession:

    user: User
    token: str
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at


@dataclass(slots=True, frozen=True)
class UserCreate:
    email: str
    username: str
    password_hash: str


@dataclass(slots=True, frozen=True)
class UserUpdate:
    id: str
    email: str | None = None
    username: str | None = None
    password_hash: str | None = None


@dataclass(slots=True, frozen=True)
class RegisterInput:
    email: str
    username: str
    password: str


@dataclass(slots=True, frozen=True)
class LoginInput:
    email: str
    password: str


@dataclass(slots=True, frozen=True)
class ChangePasswordInput:
    user_id: str
    current_password: str
    new_password: str
