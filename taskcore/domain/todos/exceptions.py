# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from taskcore.shared.errors.base import NotFoundError


class TodoNotFoundError(NotFoundError):
    code = "todo_not_found"

    def __init__(self, todo_id: str) -> None:
        super().__init__(
            f"Todo with id {todo_id} not found",
            context={"todo_id": todo_id},
        )
