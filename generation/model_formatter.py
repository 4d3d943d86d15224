"""
TypeSpec model rendering.
"""
from __future__ import annotations

from typing import List, Optional

from parsing.models import EnumDefinition, Field, TableModel

from .enum_generator import get_enum_type


def _doc_comment(text: str, indent: str) -> str:
    return f"{indent}/** {text.replace('*/', '* /')} */\n"


def format_field(field: Field, model_name: str, enums: List[EnumDefinition],
                 optional_marker: bool = False) -> str:
    description = _doc_comment(field.description, "    ") if field.description else ""

    base_type = get_enum_type(field.name, model_name, enums) or field.type
    field_type = f"{base_type} | null" if field.nullable else base_type
    marker = "?" if optional_marker and field.nullable else ""
    metadata = f" // {field.metadata}" if field.metadata else ""

    return f"{description}    {field.name}{marker}: {field_type};{metadata}"


def format_model_definition(model: TableModel, enums: Optional[List[EnumDefinition]] = None,
                            optional_marker: bool = False) -> str:
    enums = enums or []
    table_comment = _doc_comment(model.comment, "  ") if model.comment else ""
    fields = "\n".join(
        format_field(field, model.name, enums, optional_marker) for field in model.fields
    )
    return f"{table_comment}  model {model.name} {{\n{fields}\n  }}"


def format_model_definitions(models: List[TableModel], enums: Optional[List[EnumDefinition]] = None,
                             optional_marker: bool = False) -> str:
    return "\n\n".join(
        format_model_definition(model, enums, optional_marker) for model in models
    )
