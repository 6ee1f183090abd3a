# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from taskcore.application.services import SecretsTokenGenerator, WerkzeugPasswordHasher
from taskcore.application.use_cases.auth import AuthUseCases
from taskcore.application.use_cases.observable import (
    ObservableAuthUseCases,
    ObservableTodoUseCases,
)
from taskcore.application.use_cases.todos import TodoUseCases
from taskcore.domain.todos import TodoRepository
from taskcore.domain.users import UserRepository
from taskcore.infrastructure.http import HttpClient, HttpxClient, ResilientHttpClient
from taskcore.infrastructure.repositories import (
    InMemoryTodoRepository,
    InMemoryUserRepository,
    PersistedTodoRepository,
    PersistedUserRepository,
    RemoteTodoRepository,
    RemoteUserRepository,
)
from taskcore.infrastructure.storage import (
    FileKeyValueStorage,
    KeyValueStorage,
    MemoryKeyValueStorage,
)
from taskcore.shared.config import AppConfig, load_config
from taskcore.shared.logging import logger, setup_logging


class Container:
    """Wires adapters and use cases from an ``AppConfig``.

    ``storage.backend`` selects the repositories: ``memory`` keeps everything
    in process dicts, ``file`` persists JSON blobs under ``storage.directory``
    and ``remote`` talks to the REST API at ``http.base_url``.
    """

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or load_config()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_generator(self) -> SecretsTokenGenerator:
        return SecretsTokenGenerator()

    @cached_property
    def key_value_storage(self) -> KeyValueStorage:
        if self.config.storage.backend == "file":
            return FileKeyValueStorage(self.config.storage.directory)
        return MemoryKeyValueStorage()

    @cached_property
    def http_client(self) -> HttpClient:
        client: HttpClient = HttpxClient(
            self.config.http.base_url,
            timeout=self.config.http.timeout,
        )
        if self.config.resilience.enabled:
            client = ResilientHttpClient.from_config(client, self.config.resilience)
        return client

    @cached_property
    def todo_repository(self) -> TodoRepository:
        backend = self.config.storage.backend
        logger.debug(f"container:todo_repository backend={backend}")
        if backend == "remote":
            return RemoteTodoRepository(
                self.http_client, endpoint=self.config.http.todos_endpoint
            )
        if backend == "file":
            return PersistedTodoRepository(
                self.key_value_storage, key=self.config.storage.todos_key
            )
        return InMemoryTodoRepository()

    @cached_property
    def user_repository(self) -> UserRepository:
        backend = self.config.storage.backend
        logger.debug(f"container:user_repository backend={backend}")
        if backend == "remote":
            return RemoteUserRepository(
                self.http_client, endpoint=self.config.http.users_endpoint
            )
        if backend == "file":
            return PersistedUserRepository(
                self.key_value_storage, key=self.config.storage.users_key
            )
        return InMemoryUserRepository()

    @cached_property
    def todo_use_cases(self) -> TodoUseCases:
        return TodoUseCases(todos=self.todo_repository)

    @cached_property
    def auth_use_cases(self) -> AuthUseCases:
        auth = self.config.auth
        return AuthUseCases(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            tokens=self.token_generator,
            session_ttl=auth.session_ttl,
            min_password_length=auth.min_password_length,
            min_username_length=auth.min_username_length,
        )

    @cached_property
    def observable_auth(self) -> ObservableAuthUseCases:
        return ObservableAuthUseCases(self.auth_use_cases)

    def observable_todos(self, owner_id: str | None) -> ObservableTodoUseCases:
        return ObservableTodoUseCases(self.todo_use_cases, owner_id=owner_id)

    async def aclose(self) -> None:
        if "http_client" not in self.__dict__:
            return
        client = self.http_client
        while isinstance(client, ResilientHttpClient):
            client = client.inner
        if isinstance(client, HttpxClient):
            await client.aclose()


def create_container(config: AppConfig | None = None) -> Container:
    """Configure logging from ``config`` and return a fresh container."""

    config = config or load_config()
    setup_logging(config.log_level, config.log_file)
    logger.info(f"container:init env={config.app_env} backend={config.storage.backend}")
    return Container(config)


__all__ = ["Container", "create_container"]
