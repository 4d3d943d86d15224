"""
Data structures shared by the schema parser, the enum parser and the
TypeSpec generator.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

DefaultValue = Union[str, int, float, bool]


@dataclass
class Field:
    """One column of a table, already resolved to a TypeSpec type."""
    name: str
    type: str
    nullable: bool = True
    description: Optional[str] = None
    metadata: Optional[str] = None
    default: Optional[DefaultValue] = None


@dataclass
class TableModel:
    """One ``create_table`` block."""
    name: str
    table_name: str
    comment: Optional[str] = None
    primary_key: Optional[str] = None
    fields: List[Field] = field(default_factory=list)

    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]


@dataclass
class EnumDefinition:
    """Values of one ``enum`` declared in a model file."""
    field_name: str
    model_name: str
    values: List[str] = field(default_factory=list)
