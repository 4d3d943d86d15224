"""
Incremental regeneration: add models missing from an existing TypeSpec
document without touching what is already there.

This is a textual splice, not a re-parse. It assumes the document ends
with the closing brace of a single top-level namespace.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Set

from parsing.models import EnumDefinition, TableModel

from .enum_generator import enum_namespace_name, generate_enum_namespaces
from .model_formatter import format_model_definitions
from .templates import EMPTY_MODELS_PLACEHOLDER

_MODEL_DECLARATION = re.compile(r"\bmodel\s+(\w+)\s*\{")
_NAMESPACE_DECLARATION = re.compile(r"\bnamespace\s+([\w.]+)\s*\{")
_TRAILING_BRACE = re.compile(r"\}\s*\Z")


class MissingClosingBraceError(ValueError):
    """The existing document has no trailing ``}`` to insert before."""


@dataclass
class AppendResult:
    """Outcome of a merge; ``appended`` is empty when nothing was added."""
    content: str
    appended: List[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.appended)


def existing_model_names(document: str) -> Set[str]:
    return set(_MODEL_DECLARATION.findall(document))


def existing_namespaces(document: str) -> Set[str]:
    return set(_NAMESPACE_DECLARATION.findall(document))


def _drop_placeholder(document: str) -> str:
    """Remove the empty-schema placeholder once real models are added."""
    return "\n".join(
        line for line in document.split("\n") if line != EMPTY_MODELS_PLACEHOLDER
    )


def merge_models(existing: str, models: List[TableModel],
                 enums: Optional[List[EnumDefinition]] = None,
                 today: Optional[date] = None,
                 optional_marker: bool = False) -> AppendResult:
    """Splice models not yet declared in ``existing`` before its last ``}``.

    Enum namespaces for the new models are added too, unless the
    document already declares them.

    Raises:
        MissingClosingBraceError: there is something to add but the
            document does not end with ``}``.
    """
    enums = enums or []
    declared = existing_model_names(existing)
    new_models = [model for model in models if model.name not in declared]

    if not new_models:
        return AppendResult(content=existing)

    match = _TRAILING_BRACE.search(existing)
    if not match:
        raise MissingClosingBraceError("document does not end with a closing brace")

    new_names = {model.name for model in new_models}
    namespaces = existing_namespaces(existing)
    new_enums = [
        enum_def for enum_def in enums
        if enum_def.model_name in new_names
        and enum_namespace_name(enum_def.model_name) not in namespaces
    ]

    stamp = (today or date.today()).isoformat()
    sections = [f"  // ---- appended at {stamp} ----"]
    enum_namespaces = generate_enum_namespaces(new_enums)
    if enum_namespaces:
        sections.append(enum_namespaces)
    sections.append(format_model_definitions(new_models, enums, optional_marker))

    block = "\n" + "\n\n".join(sections) + "\n"
    insert_at = match.start()
    head = _drop_placeholder(existing[:insert_at]).rstrip("\n")
    content = head + "\n" + block + existing[insert_at:]

    return AppendResult(content=content, appended=[model.name for model in new_models])
