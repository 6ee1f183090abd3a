# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import (
    AuthSession,
    ChangePasswordInput,
    LoginInput,
    RegisterInput,
    User,
    UserCreate,
    UserUpdate,
    UserWithPassword,
)
from .exceptions import (
    DuplicateEmailError,
    DuplicateUsernameError,
    InvalidCredentialsError,
    InvalidSessionError,
    MissingCredentialsError,
    UserNotFoundError,
)
from .repositories import PasswordHasher, TokenGenerator, UserRepository

__all__ = [
    "AuthSession",
    "ChangePasswordInput",
    "DuplicateEmailError",
    "DuplicateUsernameError",
    "InvalidCredentialsError",
    "InvalidSessionError",
    "LoginInput",
    "MissingCredentialsError",
    "PasswordHasher",
    "RegisterInput",
    "TokenGenerator",
    "User",
    "UserCreate",
    "UserNotFoundError",
    "UserRepository",
    "UserUpdate",
    "UserWithPassword",
]
