# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from taskcore.shared.errors.base import DomainError, NotFoundError


class DuplicateEmailError(DomainError):
    code = "duplicate_email"
    status = HTTPStatus.CONFLICT
    message = "Email already registered"


class DuplicateUsernameError(DomainError):
    code = "duplicate_username"
    status = HTTPStatus.CONFLICT
    message = "Username already taken"


class MissingCredentialsError(DomainError):
    code = "missing_credentials"
    message = "Email and password are required"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED
    message = "Invalid email or password"


class InvalidSessionError(DomainError):
    code = "invalid_session"
    status = HTTPStatus.UNAUTHORIZED
    message = "Invalid or expired session"


class UserNotFoundError(NotFoundError):
    code = "user_not_found"

    def __init__(self, user_id: str) -> None:
        super().__init__(
            f"User with id {user_id} not found",
            context={"user_id": user_id},
        )
