# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    message: str | None = None
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message or self.code)

    def __str__(self) -> str:
        return self.message or self.code

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code}
        if self.message:
            payload["message"] = self.message
        if self.context:
            payload["context"] = dict(self.context)
        return payload


def _class_default(error: AppError, name: str, kind: type) -> Any:
    # Subclasses declare defaults as plain class attributes; the dataclass
    # slot descriptors on AppError must not be mistaken for them.
    value = getattr(type(error), name, None)
    return value if isinstance(value, kind) else None


class DomainError(AppError):
    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_code = code or _class_default(self, "code", str) or "domain_error"
        resolved_status = status or _class_default(self, "status", HTTPStatus) or HTTPStatus.BAD_REQUEST
        resolved_message = message or _class_default(self, "message", str)
        super().__init__(
            code=resolved_code,
            status=resolved_status,
            message=resolved_message,
            context=context,
        )


class InfrastructureError(AppError):
    def __init__(
        self,
        code: str = "infrastructure_error",
        *,
        status: HTTPStatus | None = None,
        message: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_status = status or HTTPStatus.INTERNAL_SERVER_ERROR
        super().__init__(code=code, status=resolved_status, message=message, context=context)


class ValidationError(AppError):
    def __init__(
        self,
        message: str | None = None,
        *,
        code: str = "validation_error",
        field: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        if field is not None:
            context = {**(context or {}), "field": field}
        super().__init__(
            code=code,
            status=HTTPStatus.UNPROCESSABLE_ENTITY,
            message=message,
            context=context,
        )

    @property
    def field(self) -> str | None:
        if self.context:
            return cast(str | None, self.context.get("field"))
        return None


class AuthenticationRequiredError(DomainError):
    code = "authentication_required"
    status = HTTPStatus.UNAUTHORIZED
    message = "Authentication required"


class UnauthorizedError(DomainError):
    code = "unauthorized"
    status = HTTPStatus.FORBIDDEN
    message = "Unauthorized"


class NotFoundError(DomainError):
    code = "not_found"
    status = HTTPStatus.NOT_FOUND
    message = "Resource not found"


class TransportError(InfrastructureError):
    def __init__(
        self,
        status_code: int | None,
        *,
        method: str | None = None,
        url: str | None = None,
        reason: str | None = None,
    ) -> None:
        http_status = HTTPStatus.BAD_GATEWAY
        if status_code is not None:
            try:
                http_status = HTTPStatus(status_code)
            except ValueError:
                pass
        context: dict[str, Any] = {"status_code": status_code}
        if method:
            context["method"] = method
        if url:
            context["url"] = url
        if status_code is None:
            message = f"HTTP transport failure: {reason or 'no response'}"
        else:
            message = f"HTTP {status_code}: {reason or http_status.phrase}"
        super().__init__(
            "transport_error",
            status=http_status,
            message=message,
            context=context,
        )

    @property
    def status_code(self) -> int | None:
        return cast(int | None, (self.context or {}).get("status_code"))

    @property
    def is_not_found(self) -> bool:
        return self.status_code == HTTPStatus.NOT_FOUND
