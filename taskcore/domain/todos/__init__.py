# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Todo, TodoCreate, TodoStats, TodoUpdate
from .exceptions import TodoNotFoundError
from .repositories import TodoRepository

__all__ = [
    "Todo",
    "TodoCreate",
    "TodoNotFoundError",
    "TodoRepository",
    "TodoStats",
    "TodoUpdate",
]
