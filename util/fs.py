"""
File-system helpers used by the generate command and model discovery.
"""
from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Iterable, List, Pattern, Sequence, Set, Union

PathLike = Union[str, Path]

_GLOB_CHARS = re.compile(r"[*?]")

DEFAULT_IGNORED_DIRS = frozenset({
    "node_modules",
    ".git",
    "dist",
    "build",
    "vendor",
    "tmp",
})


def ensure_dir(dir_path: PathLike) -> None:
    Path(dir_path).mkdir(parents=True, exist_ok=True)


def file_exists(file_path: PathLike) -> bool:
    return Path(file_path).is_file()


def read_text(file_path: PathLike) -> str:
    return Path(file_path).read_text(encoding="utf-8")


def write_text(file_path: PathLike, content: str) -> None:
    """Write ``content``, replacing any existing file."""
    path = Path(file_path)
    ensure_dir(path.parent)
    path.write_text(content, encoding="utf-8")


def write_file_safe(file_path: PathLike, content: str) -> None:
    """Create ``file_path`` exclusively.

    Raises ``FileExistsError`` without touching the file if it already
    exists.
    """
    path = Path(file_path)
    ensure_dir(path.parent)
    with open(path, "x", encoding="utf-8") as handle:
        handle.write(content)


def _segment_regex(segment: str) -> str:
    return "".join(
        "[^/]*" if char == "*" else "[^/]" if char == "?" else re.escape(char)
        for char in segment
    )


def _pattern_regex(segments: Sequence[str]) -> Pattern[str]:
    """Compile glob segments (``**``, ``*``, ``?``) into a path regex."""
    regex = ""
    for index, segment in enumerate(segments):
        last = index == len(segments) - 1
        if segment == "**":
            regex += "[^/]+(?:/[^/]+)*" if last else "(?:[^/]+/)*"
        else:
            regex += _segment_regex(segment) + ("" if last else "/")
    return re.compile(regex)


def _walk_glob(search_root: Path, pattern: str, ignored: Set[str]) -> List[Path]:
    """Files under ``search_root`` matching ``pattern``, sorted.

    Ignored directories are pruned from the walk and never entered.
    Leading literal segments are joined onto the root so only the
    relevant subtree is walked.
    """
    segments = [segment for segment in pattern.split("/") if segment and segment != "."]
    literal: List[str] = []
    while len(segments) > 1 and not _GLOB_CHARS.search(segments[0]):
        literal.append(segments.pop(0))

    walk_root = search_root.joinpath(*literal)
    if not segments or not walk_root.is_dir():
        return []

    matcher = _pattern_regex(segments)
    max_depth = None if "**" in segments else len(segments) - 1
    matches: List[Path] = []

    for dirpath, dirnames, filenames in os.walk(walk_root):
        relative_dir = Path(dirpath).relative_to(walk_root)
        if max_depth is not None and len(relative_dir.parts) >= max_depth:
            dirnames[:] = []
        else:
            dirnames[:] = [name for name in dirnames if name not in ignored]

        for name in filenames:
            if matcher.fullmatch((relative_dir / name).as_posix()):
                matches.append(Path(dirpath) / name)

    return sorted(matches)


def find_files(root: PathLike, patterns: Sequence[str],
               ignored_dirs: Iterable[str] = DEFAULT_IGNORED_DIRS) -> List[str]:
    """Glob ``patterns`` under ``root`` and return absolute file paths.

    Patterns may start with ``../`` to search above ``root``. Results of
    each pattern are sorted; patterns are searched in order and duplicates
    are dropped.
    """
    ignored = set(ignored_dirs)
    base = Path(root).resolve()
    seen: Set[str] = set()
    results: List[str] = []

    for pattern in patterns:
        search_root = base
        remainder = pattern
        while remainder.startswith("../"):
            search_root = search_root.parent
            remainder = remainder[3:]

        for path in _walk_glob(search_root, remainder, ignored):
            resolved = str(path.resolve())
            if resolved not in seen:
                seen.add(resolved)
                results.append(resolved)

    return results
