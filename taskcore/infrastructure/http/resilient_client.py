# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Optional retrying decorator for the HTTP client port (retries, circuit breaker)."""

from __future__ import annotations

import time
from dataclasses import dataclass
from http import HTTPStatus

from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from taskcore.shared.config import ResilienceConfig
from taskcore.shared.errors import InfrastructureError, TransportError
from taskcore.shared.logging import logger

from .interfaces import HttpClient, HttpClientBase, HttpRequest, HttpResponse


class CircuitOpenError(InfrastructureError):
    def __init__(self) -> None:
        super().__init__(
            "circuit_open",
            status=HTTPStatus.SERVICE_UNAVAILABLE,
            message="Circuit breaker is open",
        )


@dataclass
class CircuitBreaker:
    """Simple in-memory circuit breaker."""

    failure_threshold: int
    reset_timeout: float

    def __post_init__(self) -> None:
        self._failures = 0
        self._opened_at: float | None = None

    @property
    def is_open(self) -> bool:
        return self._opened_at is not None

    def allow(self) -> bool:
        if self._opened_at is None:
            return True
        if time.monotonic() - self._opened_at >= self.reset_timeout:
            logger.info("breaker: half-open state")
            self._opened_at = None
            self._failures = 0
            return True
        logger.warning("breaker: open state refusing call")
        return False

    def on_success(self) -> None:
        self._failures = 0
        self._opened_at = None

    def on_failure(self) -> None:
        self._failures += 1
        if self._failures >= self.failure_threshold:
            self._opened_at = time.monotonic()
            logger.error("breaker: opening circuit after failures")


IDEMPOTENT_METHODS = frozenset({"GET", "PUT", "DELETE"})


def is_retryable(exc: BaseException) -> bool:
    """Network failures and 5xx responses are worth another attempt; 4xx are not."""

    if not isinstance(exc, TransportError):
        return False
    return exc.status_code is None or exc.status_code >= 500


class ResilientHttpClient(HttpClientBase):
    def __init__(
        self,
        inner: HttpClient,
        *,
        max_retries: int = 3,
        backoff_base: float = 0.5,
        backoff_cap: float = 8.0,
        breaker: CircuitBreaker | None = None,
    ) -> None:
        self._inner = inner
        self._max_retries = max_retries
        self._backoff_base = backoff_base
        self._backoff_cap = backoff_cap
        self._breaker = breaker or CircuitBreaker(failure_threshold=5, reset_timeout=60.0)

    @classmethod
    def from_config(cls, inner: HttpClient, config: ResilienceConfig) -> ResilientHttpClient:
        return cls(
            inner,
            max_retries=config.max_retries,
            backoff_base=config.backoff_base,
            backoff_cap=config.backoff_cap,
            breaker=CircuitBreaker(
                failure_threshold=config.circuit_fail_threshold,
                reset_timeout=config.circuit_reset_timeout,
            ),
        )

    @property
    def inner(self) -> HttpClient:
        return self._inner

    @property
    def breaker(self) -> CircuitBreaker:
        return self._breaker

    async def request(self, config: HttpRequest) -> HttpResponse:
        if not self._breaker.allow():
            raise CircuitOpenError()

        # POST and PATCH may have been applied before the failure surfaced
        attempts = self._max_retries + 1 if config.method in IDEMPOTENT_METHODS else 1
        retry = AsyncRetrying(
            stop=stop_after_attempt(attempts),
            wait=wait_exponential(multiplier=self._backoff_base, max=self._backoff_cap),
            retry=retry_if_exception(is_retryable),
            reraise=True,
        )

        try:
            async for attempt in retry:
                with attempt:
                    logger.debug(
                        f"resilience: attempt={attempt.retry_state.attempt_number} "
                        f"{config.method} {config.url}"
                    )
                    response = await self._inner.request(config)
        except Exception as exc:
            if is_retryable(exc):
                self._breaker.on_failure()
            raise

        self._breaker.on_success()
        return response


__all__ = [
    "CircuitBreaker",
    "CircuitOpenError",
    "IDEMPOTENT_METHODS",
    "ResilientHttpClient",
    "is_retryable",
]
