"""Small filesystem helpers shared by the storage adapters."""

from .fs import save_atomic

__all__ = ["save_atomic"]
