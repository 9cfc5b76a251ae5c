# src/aliasify/models.py
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Tuple


class RewriteStatus(Enum):
    UNCHANGED = "unchanged"
    REWRITTEN = "rewritten"
    # Gated import line without a single-quoted specifier
    MALFORMED = "malformed"


@dataclass(frozen=True)
class LineResult:
    """Outcome of evaluating one source line."""
    text: str
    status: RewriteStatus

    @property
    def changed(self) -> bool:
        return self.status is RewriteStatus.REWRITTEN


@dataclass(frozen=True)
class FileResult:
    """Immutable summary of one processed file."""
    path: Path
    lines: Tuple[str, ...]
    rewritten: int
    malformed: int

    @property
    def changed(self) -> bool:
        return self.rewritten > 0
