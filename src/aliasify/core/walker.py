# src/aliasify/core/walker.py
import os
import shutil
import tempfile
from pathlib import Path, PurePath
from typing import Iterator, List

import pathspec

from aliasify.core.depth import source_root_depth
from aliasify.core.exclude import is_path_excluded, is_source_file
from aliasify.core.rewriter import rewrite_lines
from aliasify.errors import SourceReadError, SourceWriteError
from aliasify.models import FileResult, RewriteStatus

def split_lines(content: str) -> List[str]:
    """
    Splits on "\\n" and drops one trailing "\\r" per line.
    A final terminator does not produce an extra empty line.
    """
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]

def write_text_atomic(path: Path, content: str) -> None:
    """Writes to a sibling temp file and renames it over the original."""
    target = Path(os.path.realpath(path))
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        shutil.copymode(target, tmp_name)
        os.replace(tmp_name, target)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise

class ImportRewriter:
    def __init__(self, root_dir: Path, exclude_spec: pathspec.PathSpec):
        self.root_dir = Path(root_dir).resolve()
        self.exclude_spec = exclude_spec

    def iter_source_files(self) -> Iterator[Path]:
        """
        Walks the tree, pruning excluded directories before descending,
        and yields every .ts/.tsx file in os.walk order.
        """
        if self.root_dir.is_file():
            if is_source_file(self.root_dir):
                yield self.root_dir
            return

        if is_path_excluded(PurePath(self.root_dir.name), self.exclude_spec, is_directory=True):
            return

        # Unreadable directories are dropped by os.walk (onerror=None)
        for root, dirs, files in os.walk(self.root_dir):
            root_path = Path(root)

            # Pruning must happen in place so os.walk skips the subtree
            for d in list(dirs):
                dir_rel_path = (root_path / d).relative_to(self.root_dir)
                if is_path_excluded(dir_rel_path, self.exclude_spec, is_directory=True):
                    dirs.remove(d)

            for f in files:
                file_abs_path = root_path / f
                rel_path = file_abs_path.relative_to(self.root_dir)

                if is_path_excluded(rel_path, self.exclude_spec, is_directory=False):
                    continue
                if not is_source_file(file_abs_path):
                    continue

                yield file_abs_path

    def process_file(self, path: Path) -> FileResult:
        """
        Rewrites matching imports of one file in place.
        The file is only written when at least one line changed.
        """
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                content = f.read()
        except UnicodeDecodeError as e:
            raise SourceReadError(f"not valid UTF-8 text ({e.reason} at byte {e.start})", path) from e
        except OSError as e:
            raise SourceReadError(f"read error: {e}", path) from e

        file_depth = source_root_depth(path)
        results = rewrite_lines(split_lines(content), file_depth, source=path)

        file_result = FileResult(
            path=path,
            lines=tuple(r.text for r in results),
            rewritten=sum(1 for r in results if r.changed),
            malformed=sum(1 for r in results if r.status is RewriteStatus.MALFORMED),
        )

        if file_result.changed:
            try:
                write_text_atomic(path, "\n".join(file_result.lines))
            except OSError as e:
                raise SourceWriteError(f"write error: {e}", path) from e

        return file_result

    def run(self) -> List[FileResult]:
        """Processes every source file and returns one result per file."""
        return [self.process_file(path) for path in self.iter_source_files()]
