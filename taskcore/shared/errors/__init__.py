from .base import (
    AppError,
    AuthenticationRequiredError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    TransportError,
    UnauthorizedError,
    ValidationError,
)

__all__ = [
    "AppError",
    "AuthenticationRequiredError",
    "DomainError",
    "InfrastructureError",
    "NotFoundError",
    "TransportError",
    "UnauthorizedError",
    "ValidationError",
]
