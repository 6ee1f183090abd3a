# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Domain layer for the taskcore application core."""

from .todos import Todo, TodoCreate, TodoNotFoundError, TodoRepository, TodoStats, TodoUpdate
from .users import (
    AuthSession,
    ChangePasswordInput,
    LoginInput,
    RegisterInput,
    User,
    UserRepository,
    UserWithPassword,
)

__all__ = [
    "AuthSession",
    "ChangePasswordInput",
    "LoginInput",
    "RegisterInput",
    "Todo",
    "TodoCreate",
    "TodoNotFoundError",
    "TodoRepository",
    "TodoStats",
    "TodoUpdate",
    "User",
    "UserRepository",
    "UserWithPassword",
]
