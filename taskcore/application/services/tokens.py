"""Session token generation."""

from __future__ import annotations

import secrets

from taskcore.domain.users.repositories import TokenGenerator


class SecretsTokenGenerator(TokenGenerator):
    def __init__(self, nbytes: int = 48) -> None:
        self._nbytes = nbytes

    def generate(self) -> str:
        return secrets.token_urlsafe(self._nbytes)
