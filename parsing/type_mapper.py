"""
Rails column type → TypeSpec scalar mapping.
"""
from __future__ import annotations

from typing import Dict

DEFAULT_TSP_TYPE = "string"

# Fixed-point decimals map to string so precision survives the trip.
RAILS_TO_TSP_TYPES: Dict[str, str] = {
    "string": "string",
    "text": "string",
    "citext": "string",
    "integer": "int32",
    "smallint": "int32",
    "bigint": "int64",
    "decimal": "string",
    "numeric": "string",
    "float": "float64",
    "boolean": "boolean",
    "datetime": "utcDateTime",
    "timestamp": "utcDateTime",
    "timestamptz": "utcDateTime",
    "date": "plainDate",
    "time": "plainTime",
    "json": "unknown",
    "jsonb": "unknown",
    "hstore": "unknown",
    "binary": "bytes",
    "uuid": "string",
    "inet": "string",
    "cidr": "string",
    "macaddr": "string",
    "references": "int64",
    "belongs_to": "int64",
}

ASSOCIATION_TYPES = frozenset({"references", "belongs_to"})
FIXED_POINT_TYPES = frozenset({"decimal", "numeric"})


def map_rails_type(rails_type: str) -> str:
    """Return the TypeSpec type for a Rails column type, ``string`` when unknown."""
    if not rails_type:
        return DEFAULT_TSP_TYPE
    return RAILS_TO_TSP_TYPES.get(rails_type.lower(), DEFAULT_TSP_TYPE)


def is_association(rails_type: str) -> bool:
    return rails_type.lower() in ASSOCIATION_TYPES
