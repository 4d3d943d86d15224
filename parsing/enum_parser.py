"""
Enum extraction from Rails model files.

Recognised declarations (Rails 7 and legacy markers):

    enum :status, { active: 0, archived: 1 }
    enum :status, { active: 0, archived: 1 } do ... end
    enum :status, [ :active, :archived ]
    enum :status, %i(active archived)
    enum :status, active: 0, archived: 1
    enum status: { active: 0, archived: 1 }

Value lists may span several lines. Explicit integer values are
discarded; only the order of the keys is kept.
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from .inflection import to_pascal_case
from .models import EnumDefinition
from .options import split_top_level, strip_comment

_ENUM_MARKER = re.compile(r"^enum\b\s*\(?\s*(?::(\w+)\s*,|(\w+):)\s*(.*)$")
_COMPACT_LIST = re.compile(r"%[iwIW]([(\[])")
_BARE_BRACKET = re.compile(r"(?<!%[iwIW])\[")
_COMPACT_CLOSERS = {"(": ")", "[": "]"}


def _strip_key(key: str) -> str:
    key = key.strip()
    if key.startswith(":"):
        key = key[1:]
    if len(key) >= 2 and key[0] == key[-1] and key[0] in ('"', "'"):
        key = key[1:-1]
    return key.strip()


def parse_hash_content(content: str) -> List[str]:
    """Keys of ``a: 0, b: 1`` style content (also ``:a => 0``)."""
    keys = []
    for pair in split_top_level(content):
        if "=>" in pair:
            key = pair.split("=>", 1)[0]
        else:
            key = pair.split(":", 1)[0] if not pair.startswith(":") else pair
        key = _strip_key(key)
        if key:
            keys.append(key)
    return keys


def parse_array_content(content: str) -> List[str]:
    """Items of ``:a, :b`` or ``"a", "b"`` style content."""
    return [item for item in (_strip_key(i) for i in split_top_level(content)) if item]


def _balance(text: str, opener: str, closer: str) -> int:
    return text.count(opener) - text.count(closer)


def _collect(rest: str, lines: List[str], start: int, opener: str, closer: str) -> str:
    """Join continuation lines until ``opener``/``closer`` balance returns to zero.

    A ``} do`` line ends the scan so a trailing behaviour block is never
    swallowed.
    """
    content = rest
    depth = _balance(rest, opener, closer)
    index = start + 1
    while depth > 0 and index < len(lines):
        next_line = strip_comment(lines[index].strip())
        content += " " + next_line
        depth += _balance(next_line, opener, closer)
        if f"{closer} do" in next_line:
            break
        index += 1
    return content


def _delimited(content: str, opener: str, closer: str) -> Optional[str]:
    """Text between the first ``opener`` and its matching ``closer``."""
    begin = content.find(opener)
    if begin < 0:
        return None
    depth = 0
    for offset in range(begin, len(content)):
        char = content[offset]
        if char == opener:
            depth += 1
        elif char == closer:
            depth -= 1
            if depth == 0:
                return content[begin + 1:offset]
    return content[begin + 1:]


def extract_hash_enum(rest: str, lines: List[str], index: int) -> List[str]:
    inner = _delimited(_collect(rest, lines, index, "{", "}"), "{", "}")
    return parse_hash_content(inner) if inner else []


def extract_array_enum(rest: str, lines: List[str], index: int) -> List[str]:
    inner = _delimited(_collect(rest, lines, index, "[", "]"), "[", "]")
    return parse_array_content(inner) if inner else []


def extract_compact_enum(rest: str, lines: List[str], index: int) -> List[str]:
    marker = _COMPACT_LIST.search(rest)
    if not marker:
        return []
    opener = marker.group(1)
    closer = _COMPACT_CLOSERS[opener]
    tail = rest[marker.end() - 1:]
    inner = _delimited(_collect(tail, lines, index, opener, closer), opener, closer)
    return inner.split() if inner else []


def extract_keyword_enum(rest: str, lines: List[str], index: int) -> List[str]:
    # Legacy options such as _prefix: true are not values.
    return [key for key in parse_hash_content(rest) if not key.startswith("_")]


# Tried in this order; the first predicate that matches picks the syntax.
_EXTRACTORS: List[Tuple[Callable[[str], bool], Callable[[str, List[str], int], List[str]]]] = [
    (lambda rest: "{" in rest, extract_hash_enum),
    (lambda rest: bool(_BARE_BRACKET.search(rest)), extract_array_enum),
    (lambda rest: bool(_COMPACT_LIST.search(rest)), extract_compact_enum),
    (lambda rest: True, extract_keyword_enum),
]


def extract_enum_values(rest: str, lines: List[str], index: int) -> List[str]:
    """Dispatch on the value-list syntax and return distinct keys in order."""
    for matches, extractor in _EXTRACTORS:
        if matches(rest):
            values = extractor(rest, lines, index)
            break
    else:
        values = []

    seen = set()
    distinct = []
    for value in values:
        if value not in seen:
            seen.add(value)
            distinct.append(value)
    return distinct


def parse_rails_enums(model_content: str, model_name: str) -> List[EnumDefinition]:
    """Parse every enum declared in a model file, in declaration order.

    Declarations that yield no values are dropped.
    """
    lines = model_content.split("\n")
    enums: List[EnumDefinition] = []

    for index, raw_line in enumerate(lines):
        match = _ENUM_MARKER.match(raw_line.strip())
        if not match:
            continue

        field_name = match.group(1) or match.group(2)
        values = extract_enum_values(strip_comment(match.group(3)), lines, index)
        if values:
            enums.append(EnumDefinition(field_name=field_name, model_name=model_name, values=values))

    return enums


def model_name_from_path(file_path: str) -> str:
    """``app/models/user_profile.rb`` → ``UserProfile``."""
    return to_pascal_case(Path(file_path).stem)
