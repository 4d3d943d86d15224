"""
Column parsing for the body of a schema.rb ``create_table`` block.

Each body line is one of:
- ``t.timestamps [null: false]``: expands to created_at/updated_at
- ``t.references "user", ...`` / ``t.belongs_to``: expands to ``user_id``
- ``t.<type> "<name>", <options>``: a regular column
- anything else (``t.index [...]``, blank lines, comments): ignored
"""
from __future__ import annotations

import json
import re
from typing import Dict, Iterable, List, Optional

from .models import DefaultValue, Field
from .options import (
    as_bool,
    as_hash,
    as_int_text,
    as_literal,
    as_symbol,
    parse_options,
    unquote,
)
from .type_mapper import FIXED_POINT_TYPES, is_association, map_rails_type

METADATA_SEPARATOR = "; "
DEFAULT_PRECISION = "10"
DEFAULT_SCALE = "0"

# Table-level directives that share the column line shape but add no column.
NON_COLUMN_DIRECTIVES = frozenset({
    "index",
    "check_constraint",
    "exclusion_constraint",
    "unique_constraint",
    "foreign_key",
})


def build_metadata(
    precision: Optional[str] = None,
    scale: Optional[str] = None,
    limit: Optional[str] = None,
    default: Optional[DefaultValue] = None,
    ref_table: Optional[str] = None,
) -> Optional[str]:
    """Compose the trailing field comment from the parts that are present.

    Order is fixed: precision/scale, limit, default, reference.
    """
    parts: List[str] = []

    if precision or scale:
        parts.append(f"precision: {precision or DEFAULT_PRECISION}, scale: {scale or DEFAULT_SCALE}")

    if limit:
        parts.append(f"limit: {limit}")

    if default is not None:
        parts.append(f"default: {json.dumps(default)}")

    if ref_table:
        parts.append(f"ref: {ref_table}")

    return METADATA_SEPARATOR.join(parts) if parts else None


def _nullable(options: Dict[str, str]) -> bool:
    explicit = as_bool(options.get("null"))
    return True if explicit is None else explicit


class ColumnLineParser:
    """Turns body lines of one table block into fields.

    The block variable (``t`` in ``do |t|``) is configurable so blocks
    written as ``do |table|`` parse the same way.
    """

    def __init__(self, block_var: str = "t"):
        var = re.escape(block_var)
        self._timestamps = re.compile(rf"^{var}\.timestamps\b(.*)$")
        self._column = re.compile(rf"""^{var}\.(\w+)\s+["']([^"']+)["'](.*)$""")

    def parse_line(self, line: str) -> List[Field]:
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            return []

        timestamps = self._timestamps.match(trimmed)
        if timestamps:
            return parse_timestamps(timestamps.group(1))

        column = self._column.match(trimmed)
        if not column:
            return []

        kind, name, rest = column.groups()
        if kind in NON_COLUMN_DIRECTIVES:
            return []

        if is_association(kind):
            return [parse_reference(name, rest)]
        return [parse_column(kind, name, rest)]

    def parse_lines(self, lines: Iterable[str]) -> List[Field]:
        fields: List[Field] = []
        for line in lines:
            fields.extend(self.parse_line(line))
        return fields


def parse_columns(table_body: str, block_var: str = "t") -> List[Field]:
    """Parse every column of a ``create_table`` body, in source order."""
    return ColumnLineParser(block_var).parse_lines(table_body.split("\n"))


def parse_timestamps(rest: str) -> List[Field]:
    options = parse_options(rest)
    nullable = _nullable(options)
    return [
        Field(name="created_at", type=map_rails_type("datetime"), nullable=nullable),
        Field(name="updated_at", type=map_rails_type("datetime"), nullable=nullable),
    ]


def parse_reference(name: str, rest: str) -> Field:
    """Expand ``t.references "user"`` into a ``user_id`` field."""
    options = parse_options(rest)

    default = as_literal(options.get("default"))
    ref_type = as_symbol(options.get("type"))
    field_type = map_rails_type(ref_type) if ref_type else map_rails_type("references")

    foreign_key = as_hash(options.get("foreign_key"))
    ref_table = as_symbol(foreign_key.get("to_table")) or name

    return Field(
        name=f"{name}_id",
        type=field_type,
        nullable=_nullable(options),
        description=unquote(options.get("comment")),
        metadata=build_metadata(
            precision=as_int_text(options.get("precision")),
            scale=as_int_text(options.get("scale")),
            limit=as_int_text(options.get("limit")),
            default=default,
            ref_table=ref_table,
        ),
        default=default,
    )


def parse_column(kind: str, name: str, rest: str) -> Field:
    """Build a regular column field; unrecognised defaults are dropped."""
    options = parse_options(rest)
    default = as_literal(options.get("default"))

    precision = scale = None
    if kind.lower() in FIXED_POINT_TYPES:
        precision = as_int_text(options.get("precision"))
        scale = as_int_text(options.get("scale"))

    return Field(
        name=name,
        type=map_rails_type(kind),
        nullable=_nullable(options),
        description=unquote(options.get("comment")),
        metadata=build_metadata(
            precision=precision,
            scale=scale,
            limit=as_int_text(options.get("limit")),
            default=default,
        ),
        default=default,
    )
