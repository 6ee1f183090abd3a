# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .todos import InMemoryTodoRepository, PersistedTodoRepository, RemoteTodoRepository
from .users import InMemoryUserRepository, PersistedUserRepository, RemoteUserRepository

__all__ = [
    "InMemoryTodoRepository",
    "InMemoryUserRepository",
    "PersistedTodoRepository",
    "PersistedUserRepository",
    "RemoteTodoRepository",
    "RemoteUserRepository",
]
