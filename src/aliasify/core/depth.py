# src/aliasify/core/depth.py
from pathlib import PurePath

from aliasify.config import ASCENT_SEGMENT, SOURCE_ROOT_MARKER

def import_ascent_depth(line: str) -> int:
    """
    Counts the "../" segments in the last whitespace-delimited token,
    which holds the quoted module specifier of an import line.
    """
    tokens = line.split()
    if not tokens:
        return 0
    return tokens[-1].count(ASCENT_SEGMENT)

def source_root_depth(path: PurePath) -> int:
    """
    Number of directory levels between a file and its nearest "src" ancestor.

    src/x.ts is 0 and src/a/b/x.ts is 2. Without a "src" ancestor the
    result is the full number of parents up to the filesystem root.
    """
    parents = path.parents
    for depth, parent in enumerate(parents):
        if parent.name == SOURCE_ROOT_MARKER:
            return depth
    return len(parents)
