# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .auth import AuthUseCases
from .observable import ObservableAuthUseCases, ObservableTodoUseCases
from .todos import TodoUseCases

__all__ = ["AuthUseCases", "ObservableAuthUseCases", "ObservableTodoUseCases", "TodoUseCases"]
