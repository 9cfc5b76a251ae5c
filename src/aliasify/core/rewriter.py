# src/aliasify/core/rewriter.py
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from aliasify.config import ALIAS_PREFIX, ASCENT_SEGMENT, IMPORT_KEYWORD, QUOTE_CHAR
from aliasify.core.depth import import_ascent_depth
from aliasify.models import LineResult, RewriteStatus

def extract_specifier(line: str) -> Optional[Tuple[str, str, str]]:
    """
    Splits an import line around its single-quoted module specifier.

    Returns (head, specifier, tail) where tail is everything after the
    closing quote, or None when the line has no single-quoted specifier.
    """
    parts = line.split(QUOTE_CHAR, 2)
    if len(parts) < 3:
        return None
    head, specifier, tail = parts
    return head, specifier, tail

def should_rewrite(line: str, file_depth: int) -> bool:
    if not line.startswith(IMPORT_KEYWORD):
        return False
    depth = import_ascent_depth(line)
    return depth > 0 and depth == file_depth

def rewrite_line(line: str, file_depth: int) -> LineResult:
    """
    Rewrites one import to the "@/" alias form when its ascent depth
    equals the file's depth below "src". Anything else passes through.
    """
    if not should_rewrite(line, file_depth):
        return LineResult(text=line, status=RewriteStatus.UNCHANGED)

    parts = extract_specifier(line)
    if parts is None:
        return LineResult(text=line, status=RewriteStatus.MALFORMED)

    head, specifier, tail = parts
    cleaned = specifier.replace(ASCENT_SEGMENT, "")
    new_line = f"{head}{QUOTE_CHAR}{ALIAS_PREFIX}{cleaned}{QUOTE_CHAR}{tail}"
    print(f"{line} --> {new_line}")
    return LineResult(text=new_line, status=RewriteStatus.REWRITTEN)

def rewrite_lines(lines: Iterable[str], file_depth: int, source: Optional[Path] = None) -> List[LineResult]:
    """Evaluates every line independently. Malformed imports are reported and kept."""
    results = []
    for lineno, line in enumerate(lines, start=1):
        result = rewrite_line(line, file_depth)
        if result.status is RewriteStatus.MALFORMED:
            location = f"{source}:{lineno}" if source is not None else f"line {lineno}"
            print(
                f"  > [Warning] Skipping {location} (no single-quoted module path): {line}",
                file=sys.stderr,
            )
        results.append(result)
    return results
