"""
Full TypeSpec document template.
"""
from __future__ import annotations

from typing import List, Optional

from generator.config import GeneratorConfig
from parsing.models import EnumDefinition, TableModel

from .enum_generator import generate_enum_namespaces
from .model_formatter import format_model_definitions

EMPTY_MODELS_PLACEHOLDER = "  // No models found in schema.rb"


def render_preamble(config: GeneratorConfig) -> str:
    return (
        'import "@typespec/http";\n'
        'import "@typespec/openapi3";\n'
        "using TypeSpec.Http;\n"
        "\n"
        f'@service(#{{ title: "{config.service_title}" }})\n'
        f'@server("{config.server_url}", "{config.server_description}")\n'
        f'@route("{config.route_prefix}")\n'
    )


def render_document(models: List[TableModel], enums: Optional[List[EnumDefinition]] = None,
                    config: Optional[GeneratorConfig] = None) -> str:
    """Render a complete TypeSpec document.

    Output depends only on the arguments, so the same input always gives
    byte-identical text.
    """
    config = config or GeneratorConfig()
    enums = enums or []

    sections = []
    enum_namespaces = generate_enum_namespaces(enums)
    if enum_namespaces:
        sections.append(enum_namespaces)

    if models:
        sections.append(format_model_definitions(models, enums, config.optional_marker))
    else:
        sections.append(EMPTY_MODELS_PLACEHOLDER)

    body = "\n\n".join(sections)
    return f"{render_preamble(config)}namespace {config.namespace} {{\n{body}\n}}\n"
