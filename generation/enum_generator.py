"""
TypeSpec enum namespace generation.
"""
from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional

from parsing.inflection import to_pascal_case
from parsing.models import EnumDefinition

_PLAIN_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def group_enums_by_model(enums: Iterable[EnumDefinition]) -> Dict[str, List[EnumDefinition]]:
    """Group enums by model name, keeping first-seen model order."""
    grouped: Dict[str, List[EnumDefinition]] = {}
    for enum_def in enums:
        grouped.setdefault(enum_def.model_name, []).append(enum_def)
    return grouped


def enum_namespace_name(model_name: str) -> str:
    return f"{model_name}Enums"


def format_enum_member(value: str) -> str:
    """Backtick-quote members that are not plain identifiers."""
    if _PLAIN_IDENTIFIER.match(value):
        return value
    return "`" + value.replace("`", "\\`") + "`"


def generate_enum(enum_def: EnumDefinition) -> str:
    enum_name = to_pascal_case(enum_def.field_name)
    values = "\n".join(f"      {format_enum_member(value)}," for value in enum_def.values)
    return f"    enum {enum_name} {{\n{values}\n    }}"


def generate_enum_namespace(model_name: str, enums: List[EnumDefinition]) -> str:
    enum_definitions = "\n\n".join(generate_enum(enum_def) for enum_def in enums)
    return f"  namespace {enum_namespace_name(model_name)} {{\n{enum_definitions}\n  }}"


def generate_enum_namespaces(enums: List[EnumDefinition]) -> str:
    """Render one namespace per model; empty string when there are no enums."""
    if not enums:
        return ""

    grouped = group_enums_by_model(enums)
    return "\n\n".join(
        generate_enum_namespace(model_name, model_enums)
        for model_name, model_enums in grouped.items()
    )


def get_enum_type(field_name: str, model_name: str, enums: List[EnumDefinition]) -> Optional[str]:
    """Qualified enum type for a field, or ``None`` when the field is not an enum."""
    for enum_def in enums:
        if enum_def.model_name == model_name and enum_def.field_name == field_name:
            return f"{enum_namespace_name(model_name)}.{to_pascal_case(enum_def.field_name)}"
    return None
