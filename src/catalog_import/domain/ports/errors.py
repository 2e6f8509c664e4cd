"""Errors raised by store adapters."""

from __future__ import annotations


class StoreError(RuntimeError):
    """Raised by a store port when a persistence operation fails."""
