"""Adapter for optional python-magic integration."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class MagicAdapter:
    """Thin wrapper around python-magic to keep IO details out of callers."""

    def __init__(self) -> None:
        self._magic: Any | None
        try:
            import magic as _magic

            self._magic = _magic
        except Exception:
            self._magic = None

    @property
    def available(self) -> bool:
        return self._magic is not None

    def describe(self, path: str | Path) -> dict[str, str] | None:
        """Return the MIME type and description of a file, None when libmagic is missing"""
        if self._magic is None:
            return None
        try:
            return {
                "mime": self._magic.from_file(str(path), mime=True),
                "description": self._magic.from_file(str(path)),
            }
        except Exception:
            return None
