from __future__ import annotations

import asyncio
from datetime import UTC, datetime, timedelta

import pytest

from taskcore.application.use_cases.auth import AuthUseCases
from taskcore.domain.users import (
    ChangePasswordInput,
    DuplicateEmailError,
    DuplicateUsernameError,
    InvalidCredentialsError,
    InvalidSessionError,
    LoginInput,
    MissingCredentialsError,
    RegisterInput,
    UserUpdate,
)
from taskcore.infrastructure.repositories import InMemoryUserRepository
from taskcore.shared.errors import UnauthorizedError, ValidationError

from .fakes import DeterministicHasher, FakeClock, SequentialTokens


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def auth(users: InMemoryUserRepository, clock: FakeClock) -> AuthUseCases:
    return AuthUseCases(
        users=users,
        password_hasher=DeterministicHasher(),
        tokens=SequentialTokens(),
        session_ttl=timedelta(hours=24),
        now_fn=clock,
    )


ALICE = RegisterInput(email="alice@example.com", username="alice", password="secret123")


def test_register_issues_session(auth: AuthUseCases, users: InMemoryUserRepository) -> None:
    session = asyncio.run(auth.register(ALICE))

    assert session.user.email == "alice@example.com"
    assert session.token == "token-1"
    assert session.expires_at == datetime(2025, 1, 2, tzinfo=UTC)
    assert not hasattr(session.user, "password_hash")
    stored = asyncio.run(users.get_by_email("alice@example.com"))
    assert stored is not None
    assert stored.password_hash == "hashed:secret123"


@pytest.mark.parametrize(
    ("data", "message"),
    [
        (RegisterInput(email="nope", username="alice", password="secret123"), "Invalid email address"),
        (RegisterInput(email="a@b.c", username="al", password="secret123"), "Username must be at least 3 characters"),
        (RegisterInput(email="a@b.c", username="alice", password="12345"), "Password must be at least 6 characters"),
    ],
)
def test_register_validation(auth: AuthUseCases, data: RegisterInput, message: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        asyncio.run(auth.register(data))

    assert str(exc_info.value) == message
    assert auth.active_session_count() == 0


def test_register_rejects_duplicate_email_in_any_case(auth: AuthUseCases) -> None:
    asyncio.run(auth.register(ALICE))

    with pytest.raises(DuplicateEmailError) as exc_info:
        asyncio.run(
            auth.register(RegisterInput(email="ALICE@Example.com", username="other", password="secret123"))
        )
    assert str(exc_info.value) == "Email already registered"


def test_register_rejects_duplicate_username(auth: AuthUseCases) -> None:
    asyncio.run(auth.register(ALICE))

    with pytest.raises(DuplicateUsernameError) as exc_info:
        asyncio.run(
            auth.register(RegisterInput(email="bob@example.com", username="alice", password="secret123"))
        )
    assert str(exc_info.value) == "Username already taken"


def test_login_and_validate(auth: AuthUseCases) -> None:
    asyncio.run(auth.register(ALICE))

    session = asyncio.run(auth.login(LoginInput(email="Alice@Example.com", password="secret123")))

    assert session.token == "token-2"
    assert asyncio.run(auth.validate_session(session.token)) == session.user
    assert asyncio.run(auth.get_current_user(session.token)) == session.user
    assert auth.is_authenticated(session.token) is True


def test_login_failures_share_one_message(auth: AuthUseCases) -> None:
    asyncio.run(auth.register(ALICE))

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        asyncio.run(auth.login(LoginInput(email="alice@example.com", password="wrong-pass")))
    with pytest.raises(InvalidCredentialsError) as unknown_email:
        asyncio.run(auth.login(LoginInput(email="ghost@example.com", password="secret123")))

    assert str(wrong_password.value) == str(unknown_email.value) == "Invalid email or password"


def test_login_requires_both_fields(auth: AuthUseCases) -> None:
    with pytest.raises(MissingCredentialsError):
        asyncio.run(auth.login(LoginInput(email="", password="secret123")))


def test_session_expires_and_is_dropped(auth: AuthUseCases, clock: FakeClock) -> None:
    session = asyncio.run(auth.register(ALICE))

    clock.advance(timedelta(hours=23, minutes=59))
    assert auth.is_authenticated(session.token) is True

    clock.advance(timedelta(minutes=1))
    assert auth.is_authenticated(session.token) is False
    assert asyncio.run(auth.validate_session(session.token)) is None
    assert auth.active_session_count() == 0


def test_unknown_or_missing_token(auth: AuthUseCases) -> None:
    assert asyncio.run(auth.validate_session(None)) is None
    assert asyncio.run(auth.validate_session("bogus")) is None
    assert auth.is_authenticated(None) is False


def test_logout_revokes_and_is_idempotent(auth: AuthUseCases) -> None:
    session = asyncio.run(auth.register(ALICE))

    asyncio.run(auth.logout(session.token))
    asyncio.run(auth.logout(session.token))
    asyncio.run(auth.logout(None))

    assert asyncio.run(auth.validate_session(session.token)) is None


def test_refresh_replaces_token(auth: AuthUseCases, clock: FakeClock) -> None:
    session = asyncio.run(auth.register(ALICE))
    clock.advance(timedelta(hours=12))

    refreshed = asyncio.run(auth.refresh_session(session.token))

    assert refreshed.token != session.token
    assert refreshed.expires_at == clock.now + timedelta(hours=24)
    assert asyncio.run(auth.validate_session(session.token)) is None
    assert asyncio.run(auth.validate_session(refreshed.token)) == session.user


def test_refresh_of_expired_session_fails(auth: AuthUseCases, clock: FakeClock) -> None:
    session = asyncio.run(auth.register(ALICE))
    clock.advance(timedelta(days=2))

    with pytest.raises(InvalidSessionError) as exc_info:
        asyncio.run(auth.refresh_session(session.token))
    assert str(exc_info.value) == "Invalid or expired session"


def test_change_password(auth: AuthUseCases) -> None:
    session = asyncio.run(auth.register(ALICE))
    user_id = session.user.id

    asyncio.run(
        auth.change_password(
            session.token,
            ChangePasswordInput(user_id=user_id, current_password="secret123", new_password="newsecret"),
        )
    )

    with pytest.raises(InvalidCredentialsError):
        asyncio.run(auth.login(LoginInput(email="alice@example.com", password="secret123")))
    assert asyncio.run(auth.login(LoginInput(email="alice@example.com", password="newsecret")))


def test_change_password_checks_current_and_length(auth: AuthUseCases) -> None:
    session = asyncio.run(auth.register(ALICE))
    user_id = session.user.id

    with pytest.raises(InvalidCredentialsError) as wrong:
        asyncio.run(
            auth.change_password(
                session.token,
                ChangePasswordInput(user_id=user_id, current_password="nope", new_password="newsecret"),
            )
        )
    assert str(wrong.value) == "Current password is incorrect"

    with pytest.raises(ValidationError) as short:
        asyncio.run(
            auth.change_password(
                session.token,
                ChangePasswordInput(user_id=user_id, current_password="secret123", new_password="123"),
            )
        )
    assert str(short.value) == "New password must be at least 6 characters"


def test_change_password_after_email_change(auth: AuthUseCases, users: InMemoryUserRepository) -> None:
    session = asyncio.run(auth.register(ALICE))
    user_id = session.user.id
    asyncio.run(users.update(UserUpdate(id=user_id, email="alice@new.example.com")))

    asyncio.run(
        auth.change_password(
            session.token,
            ChangePasswordInput(user_id=user_id, current_password="secret123", new_password="newsecret"),
        )
    )

    relogin = asyncio.run(auth.login(LoginInput(email="alice@new.example.com", password="newsecret")))
    assert relogin.user.id == user_id


def test_change_password_for_another_user_is_unauthorized(auth: AuthUseCases) -> None:
    session = asyncio.run(auth.register(ALICE))

    with pytest.raises(UnauthorizedError):
        asyncio.run(
            auth.change_password(
                session.token,
                ChangePasswordInput(user_id="someone-else", current_password="secret123", new_password="newsecret"),
            )
        )


def test_register_then_login_scenario(auth: AuthUseCases) -> None:
    async def scenario() -> str:
        await auth.register(RegisterInput(email="a@x.com", username="abc", password="secret1"))
        session = await auth.login(LoginInput(email="a@x.com", password="secret1"))
        return session.user.username

    assert asyncio.run(scenario()) == "abc"
