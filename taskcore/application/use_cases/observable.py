# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Push-style wrappers that publish state to subscribers after every change.

The wrappers hold no business rules of their own: every operation goes
through ``TodoUseCases`` or ``AuthUseCases`` and only the resulting state is
mirrored and published.
"""

from __future__ import annotations

from taskcore.domain.todos import Todo, TodoCreate, TodoUpdate
from taskcore.domain.users import AuthSession, InvalidSessionError, LoginInput, RegisterInput, User
from taskcore.shared.events import EventChannel, Subscriber, Unsubscribe

from .auth import AuthUseCases
from .todos import TodoUseCases


class ObservableTodoUseCases:
    """Keeps a local mirror of one owner's todos and publishes it on change."""

    def __init__(self, use_cases: TodoUseCases, *, owner_id: str | None = None) -> None:
        self._use_cases = use_cases
        self._owner_id = owner_id
        self._todos: list[Todo] = []
        self._channel: EventChannel[list[Todo]] = EventChannel("todos")

    def subscribe(self, callback: Subscriber[list[Todo]]) -> Unsubscribe:
        return self._channel.subscribe(callback)

    @property
    def todos(self) -> list[Todo]:
        return list(self._todos)

    @property
    def completed_count(self) -> int:
        return sum(1 for todo in self._todos if todo.completed)

    @property
    def pending_count(self) -> int:
        return sum(1 for todo in self._todos if not todo.completed)

    async def load(self) -> list[Todo]:
        self._todos = await self._use_cases.get_all_todos(self._owner_id)
        self._publish()
        return self.todos

    async def create_todo(self, data: TodoCreate) -> Todo:
        todo = await self._use_cases.create_todo(data, self._owner_id)
        self._todos.append(todo)
        self._publish()
        return todo

    async def update_todo(self, data: TodoUpdate) -> Todo:
        todo = await self._use_cases.update_todo(data, self._owner_id)
        self._replace(todo)
        return todo

    async def toggle_todo(self, todo_id: str) -> Todo:
        todo = await self._use_cases.toggle_todo(todo_id, self._owner_id)
        self._replace(todo)
        return todo

    async def delete_todo(self, todo_id: str) -> None:
        await self._use_cases.delete_todo(todo_id, self._owner_id)
        self._todos = [todo for todo in self._todos if todo.id != todo_id]
        self._publish()

    async def clear_completed(self) -> int:
        removed = await self._use_cases.clear_completed(self._owner_id)
        if removed:
            self._todos = [todo for todo in self._todos if not todo.completed]
            self._publish()
        return removed

    def _replace(self, updated: Todo) -> None:
        for index, todo in enumerate(self._todos):
            if todo.id == updated.id:
                self._todos[index] = updated
                break
        else:
            self._todos.append(updated)
        self._publish()

    def _publish(self) -> None:
        self._channel.publish(self.todos)


class ObservableAuthUseCases:
    """Tracks the current session and publishes the signed-in user (or None)."""

    def __init__(self, auth: AuthUseCases) -> None:
        self._auth = auth
        self._session: AuthSession | None = None
        self._channel: EventChannel[User | None] = EventChannel("auth")

    def subscribe(self, callback: Subscriber[User | None]) -> Unsubscribe:
        return self._channel.subscribe(callback)

    @property
    def current_user(self) -> User | None:
        return self._session.user if self._session else None

    @property
    def token(self) -> str | None:
        return self._session.token if self._session else None

    @property
    def is_authenticated(self) -> bool:
        return self._session is not None and self._auth.is_authenticated(self._session.token)

    async def register(self, data: RegisterInput) -> AuthSession:
        return self._set(await self._auth.register(data))

    async def login(self, data: LoginInput) -> AuthSession:
        return self._set(await self._auth.login(data))

    async def logout(self) -> None:
        if self._session is not None:
            await self._auth.logout(self._session.token)
        self._session = None
        self._channel.publish(None)

    async def refresh(self) -> AuthSession:
        if self._session is None:
            raise InvalidSessionError()
        try:
            session = await self._auth.refresh_session(self._session.token)
        except InvalidSessionError:
            self._session = None
            self._channel.publish(None)
            raise
        return self._set(session)

    async def check(self) -> User | None:
        """Re-validate the tracked session, dropping it if it has expired."""

        user = await self._auth.validate_session(self.token)
        if user is None:
            self._session = None
        self._channel.publish(user)
        return user

    def _set(self, session: AuthSession) -> AuthSession:
        self._session = session
        self._channel.publish(session.user)
        return session


__all__ = ["ObservableAuthUseCases", "ObservableTodoUseCases"]
