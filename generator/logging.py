"""
Logging and reporting for the Rails → TypeSpec generator.

``StructuredLogger`` and ``GeneratorLogger`` wire stdlib logging to a
Rich console. ``Reporter`` is the small sink the generate command talks
to, so the command can be driven from tests without capturing output.
"""
from __future__ import annotations

import json
import logging
import time
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Dict, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

PROJECT_MODULES = [
    "generator",
    "generation",
    "parsing",
    "discovery",
    "util",
]

THIRD_PARTY_LOGGERS = [
    "markdown_it",  # markdown-it-py used by rich
]


def _rich_handler(console: Console) -> RichHandler:
    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True
    )
    handler.setFormatter(logging.Formatter(
        fmt="%(message)s",
        datefmt="[%X]"
    ))
    return handler


class StructuredLogger:
    """Structured logger with Rich console integration."""

    def __init__(self, name: str, level: str = "INFO", console: Optional[Console] = None):
        """
        Initialize structured logger.

        Args:
            name: Logger name
            level: Logging level
            console: Rich console for output
        """
        self.name = name
        self.console = console or Console(stderr=True)

        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))

        # Disable propagation to avoid duplicate logs when root logger also has handlers
        self.logger.propagate = False
        self.logger.handlers.clear()
        self.logger.addHandler(_rich_handler(self.console))

    def _format_message(self, message: str, extra: Optional[Dict[str, Any]] = None) -> str:
        """Format message with extra data."""
        if extra:
            return f"{message} | {json.dumps(extra, default=str)}"
        return message

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log debug message."""
        self.logger.debug(self._format_message(message, extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log info message."""
        self.logger.info(self._format_message(message, extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log warning message."""
        self.logger.warning(self._format_message(message, extra))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None,
              exc_info: bool = False) -> None:
        """Log error message."""
        self.logger.error(self._format_message(message, extra), exc_info=exc_info)

    @contextmanager
    def operation(self, operation_name: str, extra: Optional[Dict[str, Any]] = None):
        """
        Context manager for timing operations.

        Args:
            operation_name: Name of the operation
            extra: Additional data to log
        """
        start_time = time.time()
        self.debug(f"Starting operation: {operation_name}", extra)

        try:
            yield
            duration = time.time() - start_time
            self.debug(
                f"Completed operation: {operation_name}",
                {"duration_ms": round(duration * 1000, 2), **(extra or {})}
            )
        except Exception as e:
            duration = time.time() - start_time
            self.debug(
                f"Failed operation: {operation_name}",
                {
                    "duration_ms": round(duration * 1000, 2),
                    "error": str(e),
                    "error_type": type(e).__name__,
                    **(extra or {})
                }
            )
            raise


class GeneratorLogger:
    """Centralized logger for the generator."""

    _instance: Optional[StructuredLogger] = None

    @classmethod
    def get_logger(cls, name: str = "rails_tsp", level: str = "INFO",
                   console: Optional[Console] = None) -> StructuredLogger:
        """Get or create the global generator logger."""
        if cls._instance is None:
            cls._instance = StructuredLogger(name, level, console)
        return cls._instance

    @classmethod
    def configure(cls, level: str = "INFO", console: Optional[Console] = None) -> None:
        """
        Configure the global generator logger and root logger.

        Args:
            level: Logging level for project loggers (INFO or DEBUG)
            console: Rich console
        """
        if cls._instance:
            cls._instance.logger.setLevel(getattr(logging, level.upper()))
            if console:
                cls._instance.console = console
                for handler in cls._instance.logger.handlers:
                    if isinstance(handler, RichHandler):
                        handler.console = console
        else:
            cls._instance = StructuredLogger("rails_tsp", level, console)

        # Root logger stays at WARNING to silence third-party libraries
        _console = console or Console(stderr=True)
        root_logger = logging.getLogger()
        root_logger.setLevel(logging.WARNING)
        root_logger.handlers.clear()
        root_logger.addHandler(_rich_handler(_console))

        for module_name in PROJECT_MODULES:
            module_logger = logging.getLogger(module_name)
            module_logger.setLevel(getattr(logging, level.upper()))
            module_logger.handlers.clear()
            module_logger.propagate = True

        for logger_name in THIRD_PARTY_LOGGERS:
            third_party_logger = logging.getLogger(logger_name)
            third_party_logger.setLevel(logging.WARNING)
            third_party_logger.propagate = True

    @classmethod
    def reset(cls) -> None:
        """Drop the global instance (used by tests)."""
        cls._instance = None


class Reporter(ABC):
    """Output sink for user-facing progress lines."""

    @abstractmethod
    def info(self, message: str) -> None:
        pass

    @abstractmethod
    def warn(self, message: str) -> None:
        pass


class LoggerReporter(Reporter):
    """Reporter backed by a ``StructuredLogger``."""

    def __init__(self, logger: Optional[StructuredLogger] = None):
        self.logger = logger or GeneratorLogger.get_logger()

    def info(self, message: str) -> None:
        self.logger.info(message)

    def warn(self, message: str) -> None:
        self.logger.warning(message)


class ConsoleReporter(Reporter):
    """Reporter printing status lines with Rich formatting."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def info(self, message: str) -> None:
        self.console.print(f"[green]✓ {escape(message)}[/green]")

    def warn(self, message: str) -> None:
        self.console.print(f"[yellow]⚠ {escape(message)}[/yellow]")
