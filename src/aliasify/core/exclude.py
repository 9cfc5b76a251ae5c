# src/aliasify/core/exclude.py
from pathlib import Path, PurePath
import pathspec
from aliasify.config import DEFAULT_EXCLUDE_PATTERNS, SOURCE_EXTENSIONS

def load_exclude_spec() -> pathspec.PathSpec:
    """Builds the PathSpec used to prune the walk from DEFAULT_EXCLUDE_PATTERNS."""
    return pathspec.PathSpec.from_lines("gitwildmatch", DEFAULT_EXCLUDE_PATTERNS)

def is_path_excluded(rel_path: PurePath, spec: pathspec.PathSpec, is_directory: bool = False) -> bool:
    """
    Matches a root-relative path against the exclude rules.
    Directories get a trailing slash so "node_modules/" only hits directories.
    """
    candidate = rel_path.as_posix()
    if is_directory and not candidate.endswith("/"):
        candidate += "/"
    return spec.match_file(candidate)

def is_source_file(path: Path) -> bool:
    """True for .ts and .tsx files; the suffix must match exactly."""
    return path.suffix in SOURCE_EXTENSIONS
