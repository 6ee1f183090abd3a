# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Key-value blob storage used by the persisted repositories."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Protocol

from taskcore.shared.logging import logger
from taskcore.utils.fs import save_atomic

_KEY_RE = re.compile(r"^[A-Za-z0-9_.\-]+$")


class KeyValueStorage(Protocol):
    """Protocol for string blobs stored under string keys."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryKeyValueStorage(KeyValueStorage):
    """Keeps blobs in a dict; lives as long as the instance."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class FileKeyValueStorage(KeyValueStorage):
    """Stores each key as ``<key>.json`` within the configured root."""

    def __init__(self, root: Path) -> None:
        self._root = root
        self._root.mkdir(parents=True, exist_ok=True)

    def _resolve(self, key: str) -> Path:
        if not _KEY_RE.match(key):
            msg = f"Invalid storage key: {key!r}"
            raise ValueError(msg)
        path = (self._root / f"{key}.json").resolve()
        if not str(path).startswith(str(self._root.resolve())):
            msg = "Attempted directory traversal outside storage root"
            raise ValueError(msg)
        return path

    def get_item(self, key: str) -> str | None:
        file_path = self._resolve(key)
        if not file_path.exists():
            return None
        logger.debug(f"storage: read path={file_path}")
        return file_path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        file_path = self._resolve(key)
        data = value.encode("utf-8")
        save_atomic(file_path, data)
        logger.debug(f"storage: write path={file_path} size={len(data)}")

    def remove_item(self, key: str) -> None:
        file_path = self._resolve(key)
        file_path.unlink(missing_ok=True)


__all__ = ["FileKeyValueStorage", "KeyValueStorage", "MemoryKeyValueStorage"]
