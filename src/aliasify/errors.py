# src/aliasify/errors.py
from pathlib import Path
from typing import Optional


class AliasifyError(Exception):
    """Base error for a run that cannot continue."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.message = message
        self.path = path
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.path}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', path='{self.path}')"


class SourceReadError(AliasifyError):
    """Source file could not be read or decoded as UTF-8."""


class SourceWriteError(AliasifyError):
    """Rewritten content could not be written back."""
