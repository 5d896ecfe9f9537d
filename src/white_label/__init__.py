"""white-label: build-time brand selection for white-label builds."""

from __future__ import annotations

__version__ = "0.1.0"
