# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .in_memory_todo_repository import InMemoryTodoRepository
from .persisted_todo_repository import PersistedTodoRepository
from .remote_todo_repository import RemoteTodoRepository

__all__ = ["InMemoryTodoRepository", "PersistedTodoRepository", "RemoteTodoRepository"]
