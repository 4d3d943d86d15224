"""
Tokenizer for Ruby keyword-argument tails.

``create_table`` headers and column lines in schema.rb end with a list of
Ruby keyword arguments (``limit: 255, null: false, comment: "..."``).
This module splits such a tail into ``key -> raw value`` pairs while
respecting string literals and nested ``{}``, ``[]`` and ``()`` groups,
then offers small helpers to interpret the raw values.
"""
from __future__ import annotations

import re
from typing import Dict, List, Optional, Union

_OPENERS = {"{": "}", "[": "]", "(": ")"}
_CLOSERS = set(_OPENERS.values())

_KEYWORD_PAIR = re.compile(r'^(?:"(\w+)"|(\w+)):\s*(.*)$', re.DOTALL)
_ROCKET_PAIR = re.compile(r'^(?::(\w+)|"(\w+)")\s*=>\s*(.*)$', re.DOTALL)
_INTEGER = re.compile(r"^-?\d+$")
_DECIMAL = re.compile(r"^-?\d+\.\d+$")
_SYMBOL = re.compile(r"^:(\w+)$")
_QUOTED = re.compile(r'^(["\'])(.*)\1$', re.DOTALL)
_ESCAPE = re.compile(r"\\(.)", re.DOTALL)
_WHITESPACE_ESCAPES = frozenset({"n", "t", "r"})


def split_top_level(text: str, separator: str = ",") -> List[str]:
    """Split ``text`` on ``separator`` outside strings and bracket groups."""
    parts: List[str] = []
    current: List[str] = []
    depth = 0
    quote: Optional[str] = None
    escaped = False

    for char in text:
        if quote:
            current.append(char)
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                quote = None
            continue

        if char in ('"', "'"):
            quote = char
        elif char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            depth = max(depth - 1, 0)
        elif char == separator and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)

    parts.append("".join(current))
    return [part.strip() for part in parts if part.strip()]


def parse_options(tail: str) -> Dict[str, str]:
    """Parse a keyword-argument tail into a mapping of raw value strings.

    Pieces that are not ``key: value`` or ``:key => value`` pairs are
    skipped. Later duplicates win, as they would in Ruby.
    """
    options: Dict[str, str] = {}
    if not tail:
        return options

    for piece in split_top_level(tail.strip().lstrip(",")):
        match = _KEYWORD_PAIR.match(piece) or _ROCKET_PAIR.match(piece)
        if not match:
            continue
        key = match.group(1) or match.group(2)
        options[key] = match.group(3).strip()
    return options


def _unescape(body: str, quote: str) -> str:
    """Undo Ruby string escapes.

    Escaped quotes and backslashes are unescaped. In double-quoted
    strings ``\\n``, ``\\t`` and ``\\r`` become a space so the text stays on
    one line. Any other escape is kept as written.
    """
    def replace(match: re.Match) -> str:
        char = match.group(1)
        if char in ("\\", quote):
            return char
        if quote == '"' and char in _WHITESPACE_ESCAPES:
            return " "
        return match.group(0)

    return _ESCAPE.sub(replace, body)


def unquote(raw: Optional[str]) -> Optional[str]:
    """Return the contents of a quoted Ruby string literal, else ``None``."""
    if raw is None:
        return None
    match = _QUOTED.match(raw.strip())
    if not match:
        return None
    return _unescape(match.group(2), match.group(1))


def strip_comment(line: str) -> str:
    """Drop a trailing ``# comment`` that sits outside string literals."""
    quote: Optional[str] = None
    escaped = False

    for index, char in enumerate(line):
        if quote:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                quote = None
        elif char in ('"', "'"):
            quote = char
        elif char == "#":
            return line[:index].rstrip()
    return line


def as_bool(raw: Optional[str]) -> Optional[bool]:
    if raw == "true":
        return True
    if raw == "false":
        return False
    return None


def as_int_text(raw: Optional[str]) -> Optional[str]:
    """Return the digits of an integer option such as ``limit: 255``."""
    if raw is not None and _INTEGER.match(raw.strip()):
        return raw.strip()
    return None


def as_symbol(raw: Optional[str]) -> Optional[str]:
    """Return the name of a ``:symbol`` (or plain string) option value."""
    if raw is None:
        return None
    match = _SYMBOL.match(raw.strip())
    if match:
        return match.group(1)
    return unquote(raw)


def as_hash(raw: Optional[str]) -> Dict[str, str]:
    """Parse a ``{ key: value }`` literal; anything else gives ``{}``."""
    if raw is None:
        return {}
    text = raw.strip()
    if not (text.startswith("{") and text.endswith("}")):
        return {}
    return parse_options(text[1:-1])


def as_literal(raw: Optional[str]) -> Optional[Union[str, int, float, bool]]:
    """Interpret a default value.

    Only string, boolean and numeric literals are returned. Lambdas,
    method calls and other expressions give ``None``.
    """
    if raw is None:
        return None
    text = raw.strip()

    quoted = unquote(text)
    if quoted is not None:
        return quoted

    boolean = as_bool(text)
    if boolean is not None:
        return boolean

    if _INTEGER.match(text):
        return int(text)
    if _DECIMAL.match(text):
        return float(text)
    return None
