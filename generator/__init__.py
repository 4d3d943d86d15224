"""
Rails schema.rb → TypeSpec generator package.

The generate command lives in ``generator.command``; this package
exposes configuration, exceptions and logging.
"""

from .config import GeneratorConfig
from .exceptions import (
    GeneratorError, ConfigurationError, OutputExistsError,
    SchemaNotFoundError, AppendError
)
from .logging import (
    GeneratorLogger, StructuredLogger, Reporter, LoggerReporter, ConsoleReporter
)

__all__ = [
    # Configuration
    'GeneratorConfig',

    # Exceptions
    'GeneratorError',
    'ConfigurationError',
    'OutputExistsError',
    'SchemaNotFoundError',
    'AppendError',

    # Logging
    'GeneratorLogger',
    'StructuredLogger',
    'Reporter',
    'LoggerReporter',
    'ConsoleReporter',
]

__version__ = '1.0.0'
