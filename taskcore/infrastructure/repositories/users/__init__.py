# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .in_memory_user_repository import InMemoryUserRepository
from .persisted_user_repository import PersistedUserRepository
from .remote_user_repository import RemoteUserRepository

__all__ = ["InMemoryUserRepository", "PersistedUserRepository", "RemoteUserRepository"]
