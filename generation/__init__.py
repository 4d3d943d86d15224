"""
TypeSpec rendering: enum namespaces, models, full documents and appends.
"""

from .enum_generator import generate_enum_namespaces, get_enum_type
from .model_formatter import format_model_definition, format_model_definitions
from .templates import render_document
from .appender import AppendResult, merge_models

__all__ = [
    'generate_enum_namespaces',
    'get_enum_type',
    'format_model_definition',
    'format_model_definitions',
    'render_document',
    'AppendResult',
    'merge_models',
]
