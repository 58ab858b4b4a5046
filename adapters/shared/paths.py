"""Config file path matching used by adapters' ``can_handle``."""

from pathlib import Path
from typing import Sequence


def path_matches(file_path: Path, file_name: str, parents: Sequence[str] = ()) -> bool:
    """
    Check a path's file name and, optionally, its closest parent directories.

    ``parents`` lists directory names from the innermost outwards, so
    ``path_matches(p, 'mcp.json', ['mcp', '.junie'])`` matches ``.junie/mcp/mcp.json``.
    """
    file_path = Path(file_path)
    if file_path.name != file_name:
        return False
    ancestors = file_path.parts[:-1]
    if len(parents) > len(ancestors):
        return False
    for offset, expected in enumerate(parents, start=1):
        if ancestors[-offset] != expected:
            return False
    return True
