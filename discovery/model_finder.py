"""
Discovery of Rails model files and enum extraction for the tables in
the current schema.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from generator.logging import Reporter
from parsing.inflection import table_to_model
from parsing.enum_parser import model_name_from_path, parse_rails_enums
from parsing.models import EnumDefinition
from util.fs import DEFAULT_IGNORED_DIRS, find_files, read_text

logger = logging.getLogger(__name__)

MODEL_PATTERNS = [
    "app/models/**/*.rb",
    "backend/app/models/**/*.rb",
    "server/app/models/**/*.rb",
    "**/app/models/**/*.rb",
]

IGNORED_MODEL_DIRS = {"concerns"}
IGNORED_MODEL_FILES = {"application_record.rb"}


def find_rails_models(project_root: str) -> List[str]:
    """Model files under ``project_root``, without concerns or ApplicationRecord."""
    files = find_files(
        project_root,
        MODEL_PATTERNS,
        ignored_dirs=set(DEFAULT_IGNORED_DIRS) | IGNORED_MODEL_DIRS,
    )
    return [path for path in files if Path(path).name not in IGNORED_MODEL_FILES]


def parse_relevant_rails_enums(
    project_root: str,
    table_names: Iterable[str],
    reporter: Optional[Reporter] = None,
    reader: Callable[[str], str] = read_text,
    finder: Callable[[str], List[str]] = find_rails_models,
) -> List[EnumDefinition]:
    """Parse enums from model files whose model matches a schema table.

    Files for unrelated models are never read. A file that cannot be
    read is reported as a warning and skipped.
    """
    relevant_models = {table_to_model(name) for name in table_names}
    if not relevant_models:
        return []

    all_enums: List[EnumDefinition] = []
    for file_path in finder(project_root):
        model_name = model_name_from_path(file_path)
        if model_name not in relevant_models:
            continue

        try:
            content = reader(file_path)
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Failed to read %s: %s", file_path, e)
            if reporter:
                reporter.warn(f"Warning: Could not parse model file {file_path}")
            continue

        enums = parse_rails_enums(content, model_name)
        logger.debug("Found %d enums in %s", len(enums), file_path)
        all_enums.extend(enums)

    return all_enums
