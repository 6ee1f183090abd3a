# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Application core for a task tracker: todo and auth use cases over swappable storage."""

__version__ = "0.1.0"
