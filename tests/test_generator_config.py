"""
Tests for generator.config.GeneratorConfig
"""
import os
import pytest
from unittest.mock import patch

from generator.config import GeneratorConfig
from generator.exceptions import ConfigurationError


class TestGeneratorConfig:
    """Test suite for GeneratorConfig."""

    def test_default_configuration(self):
        """Test default configuration values."""
        config = GeneratorConfig()

        assert config.output_file == "rails.tsp"
        assert config.service_title == "Rails API"
        assert config.server_url == "http://localhost:3000"
        assert config.route_prefix == "/api/v1"
        assert config.namespace == "Api"
        assert config.include_enums is True
        assert config.optional_marker is False
        assert config.log_level == "INFO"

    def test_custom_configuration(self):
        """Test configuration with custom values."""
        config = GeneratorConfig(
            output_file="api.tsp",
            namespace="Backend",
            include_enums=False,
            optional_marker=True,
        )

        assert config.output_file == "api.tsp"
        assert config.namespace == "Backend"
        assert config.include_enums is False
        assert config.optional_marker is True
        assert config.service_title == "Rails API"

    def test_environment_variable_loading(self):
        """Test loading configuration from environment variables."""
        env_vars = {
            'RAILS_TSP_OUT': 'contracts/rails.tsp',
            'RAILS_TSP_TITLE': 'Shop API',
            'RAILS_TSP_NAMESPACE': 'Shop',
            'RAILS_TSP_NO_ENUMS': 'true',
            'RAILS_TSP_OPTIONAL_MARKER': '1',
            'RAILS_TSP_LOG_LEVEL': 'debug',
        }

        with patch.dict(os.environ, env_vars):
            config = GeneratorConfig()

            assert config.output_file == "contracts/rails.tsp"
            assert config.service_title == "Shop API"
            assert config.namespace == "Shop"
            assert config.include_enums is False
            assert config.optional_marker is True
            assert config.log_level == "DEBUG"

    def test_invalid_environment_variables_ignored(self):
        """Test that invalid environment variables are ignored."""
        env_vars = {
            'RAILS_TSP_NAMESPACE': 'not an identifier',
            'RAILS_TSP_LOG_LEVEL': 'INVALID_LEVEL',
            'RAILS_TSP_NO_ENUMS': 'maybe',
        }

        with patch.dict(os.environ, env_vars):
            config = GeneratorConfig()

            assert config.namespace == "Api"
            assert config.log_level == "INFO"
            assert config.include_enums is True

    def test_validation_empty_output_file(self):
        """Test validation of the output file."""
        with pytest.raises(ConfigurationError, match="output_file"):
            GeneratorConfig(output_file="")

    def test_namespace_validation(self):
        """Test validation of the namespace identifier."""
        with pytest.raises(ConfigurationError, match="namespace"):
            GeneratorConfig(namespace="My Api")

    def test_log_level_validation(self):
        """Test log level validation."""
        GeneratorConfig(log_level="debug")

        with pytest.raises(ConfigurationError, match="log_level"):
            GeneratorConfig(log_level="VERBOSE")

    def test_create_default(self):
        """Test create_default class method."""
        config = GeneratorConfig.create_default()

        assert config.output_file == "rails.tsp"
        assert config.include_enums is True

    def test_update_method(self):
        """Test update method creates new instance with updated values."""
        original = GeneratorConfig()
        updated = original.update(namespace="Admin", include_enums=False)

        assert updated is not original
        assert updated.namespace == "Admin"
        assert updated.include_enums is False
        assert original.namespace == "Api"
        assert original.include_enums is True

    def test_to_dict(self):
        """Test to_dict method."""
        config_dict = GeneratorConfig().to_dict()

        assert config_dict['output_file'] == "rails.tsp"
        assert config_dict['namespace'] == "Api"
        assert config_dict['include_enums'] is True
        assert set(config_dict) == {
            'output_file', 'service_title', 'server_url', 'server_description',
            'route_prefix', 'namespace', 'include_enums', 'optional_marker', 'log_level',
        }
