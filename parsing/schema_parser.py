"""
Parser for Rails ``db/schema.rb`` files.

Walks the file line by line with a small state machine:

    outside  --create_table ... do |t|-->  in_table
    in_table --end-->                      outside

The header (possibly spread over several lines until ``do |t|``) gives
the table name and attributes; body lines are handed to the column
parser. Lines that are neither headers nor part of a block are ignored.
"""
from __future__ import annotations

import logging
import re
from typing import List, Optional

from .column_parser import ColumnLineParser
from .inflection import table_to_model
from .models import Field, TableModel
from .options import as_bool, as_hash, as_symbol, parse_options, unquote
from .type_mapper import map_rails_type

logger = logging.getLogger(__name__)

DEFAULT_PRIMARY_KEY = "id"
DEFAULT_PRIMARY_KEY_TYPE = "bigint"

_HEADER_START = re.compile(r"""^create_table\s*\(?\s*["']([^"']+)["'](.*)$""")
_HEADER_END = re.compile(r"^(.*?)\bdo\s*\|\s*(\w+)\s*\|\s*$")
_BLOCK_END = re.compile(r"^end\b")


class _TableHeader:
    """Attributes of a ``create_table`` line."""

    def __init__(self, table_name: str, attrs: str):
        options = parse_options(attrs.strip().rstrip(")"))
        self.table_name = table_name
        self.comment = unquote(options.get("comment"))
        self.custom_primary_key = as_symbol(options.get("primary_key"))

        raw_id = options.get("id")
        self.id_disabled = as_bool(raw_id) is False
        self.primary_key_type = (
            as_symbol(raw_id)
            or as_symbol(as_hash(raw_id).get("type"))
            or DEFAULT_PRIMARY_KEY_TYPE
        )


def _apply_primary_key(header: _TableHeader, fields: List[Field]) -> Optional[str]:
    """Insert the identity field when needed and return the primary key name."""
    if header.id_disabled:
        return None

    primary_key = header.custom_primary_key or DEFAULT_PRIMARY_KEY
    if not any(f.name == primary_key for f in fields):
        fields.insert(0, Field(
            name=primary_key,
            type=map_rails_type(header.primary_key_type),
            nullable=False,
        ))
    return primary_key


def _build_model(header: _TableHeader, body: List[str], block_var: str) -> TableModel:
    fields = ColumnLineParser(block_var).parse_lines(body)
    primary_key = _apply_primary_key(header, fields)

    return TableModel(
        name=table_to_model(header.table_name),
        table_name=header.table_name,
        comment=header.comment or None,
        primary_key=primary_key,
        fields=fields,
    )


def parse_schema(content: str) -> List[TableModel]:
    """Parse schema.rb text into table models, in source order.

    Never raises on malformed input: unrecognised lines are skipped and
    a block left open at end of file produces no model.
    """
    models: List[TableModel] = []

    pending_name: Optional[str] = None
    pending_attrs = ""
    header: Optional[_TableHeader] = None
    block_var = "t"
    body: List[str] = []

    for raw_line in content.split("\n"):
        line = raw_line.strip()

        if header is not None:
            if _BLOCK_END.match(line):
                models.append(_build_model(header, body, block_var))
                header, body = None, []
            else:
                body.append(line)
            continue

        if pending_name is None:
            start = _HEADER_START.match(line)
            if not start:
                continue
            pending_name, pending_attrs = start.group(1), ""
            line = start.group(2)

        finished = _HEADER_END.match(line)
        if finished:
            pending_attrs += " " + finished.group(1)
            header = _TableHeader(pending_name, pending_attrs)
            block_var = finished.group(2)
            pending_name = None
        else:
            pending_attrs += " " + line

    if header is not None or pending_name is not None:
        name = header.table_name if header is not None else pending_name
        logger.debug("Unterminated create_table block for %s ignored", name)

    return models
