"""
Locate the Rails ``db/schema.rb`` for the current working directory.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from util.fs import file_exists, find_files

logger = logging.getLogger(__name__)

PRIORITY_PATHS = [
    "db/schema.rb",
    "../backend/db/schema.rb",
    "../api/db/schema.rb",
]

GLOB_PATTERNS = [
    "../**/db/schema.rb",
    "../../**/db/schema.rb",
]


def find_schema_rb(cwd: str) -> Optional[str]:
    """Return the first schema.rb found, checking priority paths before globbing."""
    base = Path(cwd)
    for relative in PRIORITY_PATHS:
        candidate = (base / relative).resolve()
        if file_exists(candidate):
            logger.debug("Found schema.rb at priority path %s", candidate)
            return str(candidate)

    for pattern in GLOB_PATTERNS:
        matches = find_files(cwd, [pattern])
        if matches:
            logger.debug("Found schema.rb via %s: %s", pattern, matches[0])
            return matches[0]

    return None


def searched_locations() -> List[str]:
    return PRIORITY_PATHS + GLOB_PATTERNS


def project_root_for(schema_path: str) -> str:
    """``<root>/db/schema.rb`` → ``<root>``."""
    path = Path(schema_path).resolve()
    if path.parent.name == "db":
        return str(path.parent.parent)
    return str(path.parent)
