# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""In-process publish/subscribe channel."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

from taskcore.shared.logging import logger

T = TypeVar("T")

Subscriber = Callable[[T], None]
Unsubscribe = Callable[[], None]


class EventChannel(Generic[T]):
    """Delivers published values to every current subscriber, in subscription order."""

    def __init__(self, name: str = "events") -> None:
        self._name = name
        self._lock = threading.Lock()
        self._subs: list[Subscriber[T]] = []

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subs)

    def subscribe(self, callback: Subscriber[T]) -> Unsubscribe:
        with self._lock:
            self._subs.append(callback)

        def _unsubscribe() -> None:
            self.unsubscribe(callback)

        return _unsubscribe

    def unsubscribe(self, callback: Subscriber[T]) -> None:
        with self._lock:
            if callback in self._subs:
                self._subs.remove(callback)

    def publish(self, value: T) -> None:
        with self._lock:
            subs = list(self._subs)
        for callback in subs:
            try:
                callback(value)
            except Exception:
                logger.exception(f"events:{self._name} subscriber failed")


__all__ = ["EventChannel", "Subscriber", "Unsubscribe"]
