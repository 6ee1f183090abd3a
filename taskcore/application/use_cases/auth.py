# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Registration, login and session lifecycle."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from taskcore.domain.users import (
    AuthSession,
    ChangePasswordInput,
    DuplicateEmailError,
    DuplicateUsernameError,
    InvalidCredentialsError,
    InvalidSessionError,
    LoginInput,
    MissingCredentialsError,
    PasswordHasher,
    RegisterInput,
    TokenGenerator,
    User,
    UserCreate,
    UserNotFoundError,
    UserRepository,
    UserUpdate,
)
from taskcore.shared.errors import UnauthorizedError, ValidationError
from taskcore.shared.logging import logger

DEFAULT_SESSION_TTL = timedelta(hours=24)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class AuthUseCases:
    """Authenticates users and owns the table of active sessions.

    Sessions live for a fixed ``session_ttl`` from issue or refresh. Expired
    sessions are dropped lazily, the next time their token is validated.
    """

    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        tokens: TokenGenerator,
        session_ttl: timedelta = DEFAULT_SESSION_TTL,
        min_password_length: int = 6,
        min_username_length: int = 3,
        now_fn: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._tokens = tokens
        self._session_ttl = session_ttl
        self._min_password_length = min_password_length
        self._min_username_length = min_username_length
        self._now = now_fn
        self._sessions: dict[str, AuthSession] = {}

    async def register(self, data: RegisterInput) -> AuthSession:
        email = (data.email or "").strip()
        if "@" not in email:
            raise ValidationError("Invalid email address", field="email")
        if not data.username or len(data.username) < self._min_username_length:
            raise ValidationError(
                f"Username must be at least {self._min_username_length} characters",
                field="username",
            )
        if not data.password or len(data.password) < self._min_password_length:
            raise ValidationError(
                f"Password must be at least {self._min_password_length} characters",
                field="password",
            )

        if await self._users.email_exists(email):
            logger.info("auth:register rejected reason=duplicate_email")
            raise DuplicateEmailError()
        if await self._users.username_exists(data.username):
            logger.info("auth:register rejected reason=duplicate_username")
            raise DuplicateUsernameError()

        created = await self._users.create(
            UserCreate(
                email=email,
                username=data.username,
                password_hash=self._password_hasher.hash(data.password),
            )
        )
        logger.info(f"auth:register ok user_id={created.id}")
        return self._issue(created.to_public())

    async def login(self, data: LoginInput) -> AuthSession:
        if not data.email or not data.password:
            raise MissingCredentialsError()

        stored = await self._users.get_by_email(data.email.strip())
        if stored is None or not self._password_hasher.verify(data.password, stored.password_hash):
            logger.info("auth:login failed")
            raise InvalidCredentialsError()

        logger.info(f"auth:login ok user_id={stored.id}")
        return self._issue(stored.to_public())

    async def logout(self, token: str | None) -> None:
        if token and self._sessions.pop(token, None) is not None:
            logger.info("auth:logout session revoked")

    async def validate_session(self, token: str | None) -> User | None:
        if not token:
            return None
        session = self._sessions.get(token)
        if session is None:
            return None
        if session.is_expired(self._now()):
            self._sessions.pop(token, None)
            logger.debug(f"auth:session expired user_id={session.user.id}")
            return None
        return session.user

    async def get_current_user(self, token: str | None) -> User | None:
        return await self.validate_session(token)

    async def refresh_session(self, token: str | None) -> AuthSession:
        user = await self.validate_session(token)
        if user is None or token is None:
            raise InvalidSessionError()

        self._sessions.pop(token, None)
        session = self._issue(user)
        logger.info(f"auth:refresh ok user_id={user.id}")
        return session

    async def change_password(self, token: str | None, data: ChangePasswordInput) -> None:
        user = await self.validate_session(token)
        if user is None or user.id != data.user_id:
            raise UnauthorizedError()

        if not data.current_password or not data.new_password:
            raise ValidationError("Current password and new password are required")
        if len(data.new_password) < self._min_password_length:
            raise ValidationError(
                f"New password must be at least {self._min_password_length} characters",
                field="new_password",
            )

        # the session copy of the user may carry an outdated email
        current = await self._users.get_by_id(user.id)
        stored = await self._users.get_by_email(current.email) if current else None
        if stored is None:
            raise UserNotFoundError(user.id)
        if not self._password_hasher.verify(data.current_password, stored.password_hash):
            raise InvalidCredentialsError("Current password is incorrect")

        await self._users.update(
            UserUpdate(id=user.id, password_hash=self._password_hasher.hash(data.new_password))
        )
        logger.info(f"auth:password changed user_id={user.id}")

    def is_authenticated(self, token: str | None) -> bool:
        if not token:
            return False
        session = self._sessions.get(token)
        return session is not None and not session.is_expired(self._now())

    def active_session_count(self) -> int:
        return len(self._sessions)

    def _issue(self, user: User) -> AuthSession:
        session = AuthSession(
            user=user,
            token=self._tokens.generate(),
            expires_at=self._now() + self._session_ttl,
        )
        self._sessions[session.token] = session
        return session


__all__ = ["AuthUseCases", "DEFAULT_SESSION_TTL"]
