# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from taskcore.domain.users import (
    User,
    UserCreate,
    UserNotFoundError,
    UserRepository,
    UserUpdate,
    UserWithPassword,
)
from taskcore.infrastructure.http import HttpClient
from taskcore.infrastructure.serialization import parse_user_record, parse_user_records
from taskcore.shared.errors import InfrastructureError, TransportError


class RemoteUserRepository(UserRepository):
    """Users behind a REST endpoint reached through the HTTP client port."""

    def __init__(self, http: HttpClient, *, endpoint: str = "/users") -> None:
        self._http = http
        self._endpoint = endpoint.rstrip("/")

    def _item_url(self, user_id: str) -> str:
        return f"{self._endpoint}/{quote(user_id, safe='')}"

    async def get_all(self) -> list[User]:
        response = await self._http.get(self._endpoint)
        return [record.to_user() for record in parse_user_records(response.data or [])]

    async def get_by_id(self, user_id: str) -> User | None:
        try:
            response = await self._http.get(self._item_url(user_id))
        except TransportError as exc:
            if exc.is_not_found:
                return None
            raise
        if response.data is None:
            return None
        return parse_user_record(response.data).to_user()

    async def get_by_email(self, email: str) -> UserWithPassword | None:
        try:
            response = await self._http.get(f"{self._endpoint}/email/{quote(email, safe='')}")
        except TransportError as exc:
            if exc.is_not_found:
                return None
            raise
        if response.data is None:
            return None
        return parse_user_record(response.data).to_user_with_password()

    async def create(self, data: UserCreate) -> UserWithPassword:
        response = await self._http.post(
            self._endpoint,
            {
                "email": data.email,
                "username": data.username,
                "passwordHash": data.password_hash,
            },
        )
        record = parse_user_record(response.data)
        if record.password_hash is None:
            record = record.model_copy(update={"password_hash": data.password_hash})
        return record.to_user_with_password()

    async def update(self, data: UserUpdate) -> User:
        body: dict[str, Any] = {}
        if data.email is not None:
            body["email"] = data.email
        if data.username is not None:
            body["username"] = data.username
        if data.password_hash is not None:
            body["passwordHash"] = data.password_hash
        try:
            response = await self._http.patch(self._item_url(data.id), body)
        except TransportError as exc:
            if exc.is_not_found:
                raise UserNotFoundError(data.id) from exc
            raise
        return parse_user_record(response.data).to_user()

    async def delete(self, user_id: str) -> None:
        try:
            await self._http.delete(self._item_url(user_id))
        except TransportError as exc:
            if exc.is_not_found:
                raise UserNotFoundError(user_id) from exc
            raise

    async def email_exists(self, email: str) -> bool:
        response = await self._http.get(f"{self._endpoint}/check-email", {"email": email})
        return _exists_flag(response.data)

    async def username_exists(self, username: str) -> bool:
        response = await self._http.get(f"{self._endpoint}/check-username", {"username": username})
        return _exists_flag(response.data)


def _exists_flag(data: Any) -> bool:
    if not isinstance(data, dict) or not isinstance(data.get("exists"), bool):
        raise InfrastructureError("invalid_payload", message="Malformed existence check payload")
    return data["exists"]
