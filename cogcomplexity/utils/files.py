from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from cogcomplexity.parsing.treesitter import language_for_path


def iter_source_files(
    root: str,
    enabled_languages: set[str],
    ignored_dirs: set[str],
    max_file_size: Optional[int] = None,
) -> Iterable[str]:
    root_path = Path(root)
    if root_path.is_file():
        if language_for_path(str(root_path)) in enabled_languages:
            yield str(root_path)
        return
    for path in sorted(root_path.rglob("*")):
        if not path.is_file():
            continue
        if any(part in ignored_dirs for part in path.relative_to(root_path).parts):
            continue
        language = language_for_path(str(path))
        if language is None or language not in enabled_languages:
            continue
        if max_file_size is not None and path.stat().st_size > max_file_size:
            continue
        yield str(path)
