"""
Configuration management for the Rails → TypeSpec generator.

This module provides centralized configuration management with
environment-based overrides and validation.
"""
from __future__ import annotations

import os
import re
from dataclasses import asdict, dataclass

from .exceptions import ConfigurationError

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


@dataclass
class GeneratorConfig:
    """Configuration settings for generating a TypeSpec document."""

    # Output
    output_file: str = "rails.tsp"

    # Document preamble
    service_title: str = "Rails API"
    server_url: str = "http://localhost:3000"
    server_description: str = "api"
    route_prefix: str = "/api/v1"
    namespace: str = "Api"

    # Rendering
    include_enums: bool = True
    optional_marker: bool = False

    # Debug and logging
    log_level: str = "INFO"

    def __post_init__(self):
        """Post-initialization validation and environment variable loading."""
        self._load_from_environment()
        self._validate_config()

    def _load_from_environment(self) -> None:
        """Load configuration from environment variables."""
        out = os.getenv('RAILS_TSP_OUT', '').strip()
        if out:
            self.output_file = out

        title = os.getenv('RAILS_TSP_TITLE', '').strip()
        if title:
            self.service_title = title

        server_url = os.getenv('RAILS_TSP_SERVER_URL', '').strip()
        if server_url:
            self.server_url = server_url

        route = os.getenv('RAILS_TSP_ROUTE', '').strip()
        if route:
            self.route_prefix = route

        namespace = os.getenv('RAILS_TSP_NAMESPACE', '').strip()
        if namespace and _IDENTIFIER.match(namespace):
            self.namespace = namespace

        if os.getenv('RAILS_TSP_NO_ENUMS', '').lower() in ('1', 'true', 'yes'):
            self.include_enums = False

        if os.getenv('RAILS_TSP_OPTIONAL_MARKER', '').lower() in ('1', 'true', 'yes'):
            self.optional_marker = True

        log_level = os.getenv('RAILS_TSP_LOG_LEVEL', '').upper()
        if log_level in _LOG_LEVELS:
            self.log_level = log_level

    def _validate_config(self) -> None:
        """Validate configuration values."""
        if not self.output_file:
            raise ConfigurationError("output_file", self.output_file, "must not be empty")

        if not self.namespace or not _IDENTIFIER.match(self.namespace):
            raise ConfigurationError("namespace", self.namespace, "must be an identifier")

        if self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigurationError("log_level", self.log_level,
                                     f"must be one of {', '.join(_LOG_LEVELS)}")

    @classmethod
    def create_default(cls) -> GeneratorConfig:
        """Create a default configuration instance."""
        return cls()

    def update(self, **kwargs) -> GeneratorConfig:
        """
        Create a new config instance with updated values.

        Args:
            **kwargs: Configuration values to update

        Returns:
            New GeneratorConfig instance with updated values
        """
        current_values = self.to_dict()
        current_values.update(kwargs)
        return GeneratorConfig(**current_values)

    def to_dict(self) -> dict:
        """Convert configuration to dictionary."""
        return asdict(self)
