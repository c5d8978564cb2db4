"""Scripts package initialization.

Provides a namespace for the live integration tests under `scripts/tests`.
"""

from __future__ import annotations

__all__: list[str] = []
