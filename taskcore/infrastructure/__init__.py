# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .container import Container, create_container

__all__ = ["Container", "create_container"]
