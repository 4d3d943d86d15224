"""
Custom exceptions for the Rails → TypeSpec generator.

Parsing never raises; these cover the precondition and file-system
failures that end a run.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional


class GeneratorError(Exception):
    """Base exception for all generator errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize generator error.

        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary representation."""
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'details': self.details,
        }


class ConfigurationError(GeneratorError):
    """Exception raised for configuration-related errors."""

    def __init__(self, parameter: str, value: Any, reason: str,
                 details: Optional[Dict[str, Any]] = None):
        message = f"Invalid configuration for '{parameter}' = {value}: {reason}"
        super().__init__(message, details)
        self.parameter = parameter
        self.value = value
        self.reason = reason


class OutputExistsError(GeneratorError):
    """Exception raised when the output file exists and may not be replaced."""

    def __init__(self, target_path: str):
        message = "Output file already exists. Use --force to overwrite or --append to append."
        super().__init__(message, {'target_path': target_path})
        self.target_path = target_path


class SchemaNotFoundError(GeneratorError):
    """Exception raised when no schema.rb can be located."""

    def __init__(self, cwd: str, searched: List[str]):
        message = "rails schema.rb not found"
        super().__init__(message, {'cwd': cwd, 'searched': searched})
        self.cwd = cwd
        self.searched = searched


class AppendError(GeneratorError):
    """Exception raised when an existing document cannot take appended models."""

    def __init__(self, target_path: str, reason: str):
        message = f"Cannot append to '{target_path}': {reason}"
        super().__init__(message, {'target_path': target_path})
        self.target_path = target_path
        self.reason = reason
