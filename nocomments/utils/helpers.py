"""Helper utility functions for nocomments."""

import json
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

from .constants import DEFAULT_EXTENSIONS, SKIP_DIRS
from .logging import logger


def normalize_relpath(file_path: Path | str, project_root: Path | str | None = None) -> str:
    """Normalize a path to the POSIX, root-relative form used for glob matching.

    Examples:
        >>> normalize_relpath("src\\\\Program.cs")
        'src/Program.cs'

        >>> normalize_relpath("/work/app/src/Program.cs", project_root="/work/app")
        'src/Program.cs'
    """
    normalized = str(file_path).replace("\\", "/")

    if project_root is not None:
        root_str = str(project_root).replace("\\", "/").rstrip("/")
        if root_str in ("", "."):
            pass
        elif normalized.startswith(root_str + "/"):
            normalized = normalized[len(root_str) + 1 :]
        elif normalized == root_str:
            normalized = ""

    if normalized.startswith("./"):
        normalized = normalized[2:]

    return normalized.lstrip("/")


def discover_source_files(
    paths: Iterable[Path | str], extensions: Iterable[str] = DEFAULT_EXTENSIONS
) -> Iterator[Path]:
    """Yield source files under `paths` in sorted order.

    Explicit file arguments are always yielded; directories are walked and
    filtered by extension, skipping VCS, dependency and build directories.
    """
    suffixes = {ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in extensions}
    seen: set[Path] = set()

    for raw in paths:
        path = Path(raw)
        if path.is_file():
            if path not in seen:
                seen.add(path)
                yield path
            continue
        if not path.is_dir():
            logger.warning("Path does not exist: {path}", path=path)
            continue
        for candidate in sorted(path.rglob("*")):
            if any(part in SKIP_DIRS for part in candidate.relative_to(path).parts[:-1]):
                continue
            if candidate.is_file() and candidate.suffix.lower() in suffixes and candidate not in seen:
                seen.add(candidate)
                yield candidate


def save_json_file(data: Any, file_path: Path | str) -> None:
    """
    Save data as JSON to file.

    Args:
        data: Data to save
        file_path: Path to output file
    """
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
