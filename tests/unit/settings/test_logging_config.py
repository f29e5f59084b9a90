"""
Unit tests for logging configuration.
"""
import json
import logging
import logging.config
from unittest.mock import patch

import pytest

from SoftwareLicenseProviders.settings.logging import (
    CustomJsonFormatter,
    configure_logging,
    get_logging_config,
)


class TestGetLoggingConfig:
    """Tests for get_logging_config."""

    @pytest.mark.parametrize(
        "environment, level",
        [("development", "DEBUG"), ("production", "INFO"), ("test", "WARNING")],
    )
    def test_environment_levels(self, environment, level):
        """Test default level per environment."""
        config = get_logging_config(environment)

        assert config["root"]["level"] == level
        assert config["loggers"]["licenses"]["level"] == level

    def test_explicit_level(self):
        """Test an explicit level overrides the default."""
        config = get_logging_config("production", log_level="debug")

        assert config["root"]["level"] == "DEBUG"

    def test_no_file_handler_by_default(self):
        """Test logs go to the console only."""
        config = get_logging_config()

        assert "file" not in config["handlers"]
        assert config["loggers"]["core"]["handlers"] == ["console"]

    def test_file_handler(self, tmp_path):
        """Test a rotating file handler is added when configured."""
        log_file = str(tmp_path / "providers.log")

        config = get_logging_config(log_file=log_file)

        assert config["handlers"]["file"]["filename"] == log_file
        assert config["root"]["handlers"] == ["console", "file"]
        assert config["loggers"]["licenses"]["handlers"] == ["console", "file"]

    def test_console_format(self):
        """Test the console formatter can be chosen."""
        config = get_logging_config(log_format="simple")

        assert config["handlers"]["console"]["formatter"] == "simple"

    def test_json_formatter_environment(self):
        """Test the JSON formatter is built for the configured environment."""
        config = get_logging_config("production")

        assert config["formatters"]["json"]["environment"] == "production"


class TestConfigureLogging:
    """Tests for configure_logging."""

    @patch("logging.config.dictConfig")
    def test_applies_config(self, mock_dict_config):
        """Test the built configuration is handed to dictConfig."""
        configure_logging("production")

        config = mock_dict_config.call_args.args[0]
        assert config["root"]["level"] in ("INFO", "DEBUG", "WARNING", "ERROR")
        assert "licenses" in config["loggers"]
        assert config["formatters"]["json"]["environment"] == "production"


class TestCustomJsonFormatter:
    """Tests for CustomJsonFormatter."""

    def test_adds_service_fields(self):
        """Test service context and extras are emitted as JSON."""
        formatter = CustomJsonFormatter("%(levelname)s %(message)s")
        record = logging.LogRecord(
            "licenses", logging.INFO, __file__, 1, "License created", None, None
        )
        record.provider = "cpanel"

        output = json.loads(formatter.format(record))

        assert output["message"] == "License created"
        assert output["service"] == "software-license-providers"
        assert output["provider"] == "cpanel"
        assert "environment" in output

    def test_environment_override(self):
        """Test records carry the environment the formatter was built with."""
        formatter = CustomJsonFormatter("%(message)s", environment="production")
        record = logging.LogRecord(
            "licenses", logging.INFO, __file__, 1, "License expired", None, None
        )

        output = json.loads(formatter.format(record))

        assert output["environment"] == "production"

    def test_dict_config_builds_formatter(self):
        """Test dictConfig passes the environment to the formatter."""
        config = get_logging_config("production")

        formatter = logging.config.DictConfigurator(config).configure_formatter(
            dict(config["formatters"]["json"])
        )

        assert isinstance(formatter, CustomJsonFormatter)
        assert formatter.environment == "production"
