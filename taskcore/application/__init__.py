# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services import SecretsTokenGenerator, WerkzeugPasswordHasher
from .use_cases.auth import AuthUseCases
from .use_cases.observable import ObservableAuthUseCases, ObservableTodoUseCases
from .use_cases.todos import TodoUseCases

__all__ = [
    "AuthUseCases",
    "ObservableAuthUseCases",
    "ObservableTodoUseCases",
    "SecretsTokenGenerator",
    "TodoUseCases",
    "WerkzeugPasswordHasher",
]
