"""
The ``generate`` command: schema.rb (+ model enums) → TypeSpec document.

All steps run sequentially: check the target, locate and parse the
schema, collect enums, then either render a fresh document or merge new
models into the existing one.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import List, Optional

from discovery.model_finder import parse_relevant_rails_enums
from discovery.schema_locator import find_schema_rb, project_root_for, searched_locations
from generation.appender import MissingClosingBraceError, merge_models
from generation.templates import render_document
from parsing.models import EnumDefinition, TableModel
from parsing.schema_parser import parse_schema
from util.fs import file_exists, read_text, write_file_safe, write_text

from .config import GeneratorConfig
from .exceptions import AppendError, OutputExistsError, SchemaNotFoundError
from .logging import GeneratorLogger, LoggerReporter, Reporter

ACTION_CREATED = "created"
ACTION_OVERWRITTEN = "overwritten"
ACTION_APPENDED = "appended"
ACTION_SKIPPED = "skipped"


@dataclass
class GenerateOutcome:
    """What a generate run did."""
    action: str
    target_path: str
    schema_path: str
    models: List[str] = field(default_factory=list)


def collect_enums(schema_path: str, models: List[TableModel],
                  reporter: Optional[Reporter] = None) -> List[EnumDefinition]:
    project_root = project_root_for(schema_path)
    return parse_relevant_rails_enums(
        project_root,
        [model.table_name for model in models],
        reporter=reporter,
    )


def generate_rails_tsp(
    cwd: str,
    force: bool = False,
    append: bool = False,
    out: Optional[str] = None,
    config: Optional[GeneratorConfig] = None,
    reporter: Optional[Reporter] = None,
    today: Optional[date] = None,
) -> GenerateOutcome:
    """Generate (or extend) a TypeSpec file from the nearest schema.rb.

    Raises:
        OutputExistsError: target exists and neither force nor append is set
        SchemaNotFoundError: no schema.rb in any searched location
        AppendError: the existing document cannot be extended
    """
    config = config or GeneratorConfig()
    reporter = reporter or LoggerReporter()
    logger = GeneratorLogger.get_logger()

    target_path = str((Path(cwd) / (out or config.output_file)).resolve())
    exists = file_exists(target_path)

    if exists and not force and not append:
        raise OutputExistsError(target_path)

    schema_path = find_schema_rb(cwd)
    if not schema_path:
        raise SchemaNotFoundError(cwd, searched_locations())

    with logger.operation("parse_schema", {"schema_path": schema_path}):
        models = parse_schema(read_text(schema_path))
    models.sort(key=lambda model: model.name)

    enums: List[EnumDefinition] = []
    if config.include_enums and models:
        with logger.operation("collect_enums"):
            enums = collect_enums(schema_path, models, reporter)

    file_name = Path(target_path).name

    if append and exists:
        existing = read_text(target_path)
        try:
            result = merge_models(existing, models, enums, today=today,
                                  optional_marker=config.optional_marker)
        except MissingClosingBraceError as e:
            raise AppendError(target_path, str(e)) from e

        if not result.changed:
            reporter.info(f"No new models to append to: {target_path}")
            return GenerateOutcome(ACTION_SKIPPED, target_path, schema_path)

        write_text(target_path, result.content)
        reporter.info(f"Appended {len(result.appended)} models to: {target_path}")
        return GenerateOutcome(ACTION_APPENDED, target_path, schema_path, result.appended)

    content = render_document(models, enums, config)
    model_names = [model.name for model in models]

    if force and exists:
        write_text(target_path, content)
        reporter.info(f"Overwritten {file_name} at: {target_path}")
        return GenerateOutcome(ACTION_OVERWRITTEN, target_path, schema_path, model_names)

    try:
        write_file_safe(target_path, content)
    except FileExistsError as e:
        raise OutputExistsError(target_path) from e

    reporter.info(f"Created {file_name} at: {target_path}")
    return GenerateOutcome(ACTION_CREATED, target_path, schema_path, model_names)
