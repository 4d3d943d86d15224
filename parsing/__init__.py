"""
Parsing of Rails sources: schema.rb tables and model-file enums.
"""

from .models import EnumDefinition, Field, TableModel
from .inflection import singularize, table_to_model, to_pascal_case
from .type_mapper import map_rails_type
from .schema_parser import parse_schema
from .enum_parser import model_name_from_path, parse_rails_enums

__all__ = [
    'EnumDefinition',
    'Field',
    'TableModel',
    'singularize',
    'table_to_model',
    'to_pascal_case',
    'map_rails_type',
    'parse_schema',
    'parse_rails_enums',
    'model_name_from_path',
]
