"""Configuration management for the date calculator CLI.

This module provides configuration loading, validation, and management
for the date calculator, including the leap-year rule, strict input
checking, and CLI output options.
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml

from .calendar_rules import (
    DEFAULT_LEAP_YEAR_RULE,
    LeapYearRule,
    parse_leap_year_rule,
)
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class DateCalcConfig:
    """Configuration for the date calculator.

    Manages configuration from files, environment variables, and defaults.

    Attributes:
        leap_year_rule: Leap-year predicate used for month and year lengths
        strict: Reject invalid calendar dates and reversed date order
        verbose: Enable verbose logging
        json_output: Output in JSON format
    """

    def __init__(
        self,
        leap_year_rule: Any = DEFAULT_LEAP_YEAR_RULE,
        strict: bool = False,
        verbose: bool = False,
        json_output: bool = False,
    ):
        """Initialize configuration.

        Args:
            leap_year_rule: LeapYearRule or its name ("gregorian", "legacy")
            strict: Enable strict input validation
            verbose: Enable verbose logging
            json_output: Output in JSON format

        Raises:
            ConfigurationError: If the leap year rule is unknown

        Example:
            >>> config = DateCalcConfig(leap_year_rule="legacy", strict=True)
        """
        try:
            self.leap_year_rule: LeapYearRule = parse_leap_year_rule(leap_year_rule)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        self.strict = strict
        self.verbose = verbose
        self.json_output = json_output

        self._validate()

    def _validate(self):
        """Validate configuration values.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        for name in ("strict", "verbose", "json_output"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigurationError(f"{name} must be true or false")

    @classmethod
    def get_default_config_path(cls) -> Path:
        """Get default configuration file path.

        Returns:
            Path to default config file (~/.datecalc/config.yaml)
        """
        return Path.home() / ".datecalc" / "config.yaml"

    @classmethod
    def load_from_file(cls, path: Optional[Path] = None) -> "DateCalcConfig":
        """Load configuration from YAML file.

        Loads configuration from the specified path or the default path.
        If the file doesn't exist, returns default configuration.
        Merges file configuration with environment variable overrides.

        Args:
            path: Optional path to config file (default: ~/.datecalc/config.yaml)

        Returns:
            Configuration instance

        Raises:
            ConfigurationError: If configuration file is invalid
        """
        config_path = path or cls.get_default_config_path()

        config_dict: dict[str, Any] = {}

        if config_path.exists():
            try:
                with open(config_path) as f:
                    file_config = yaml.safe_load(f)
                    if file_config:
                        config_dict = file_config
                logger.debug(f"Loaded configuration from {config_path}")
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    f"Invalid YAML in configuration file: {e}"
                ) from e
            except OSError as e:
                raise ConfigurationError(
                    f"Failed to load configuration file: {e}"
                ) from e
        else:
            logger.debug(f"Configuration file not found at {config_path}, using defaults")

        if not isinstance(config_dict, dict):
            raise ConfigurationError("Configuration file must contain a mapping")

        return cls.merge_with_defaults(config_dict)

    @classmethod
    def merge_with_defaults(cls, config_dict: dict[str, Any]) -> "DateCalcConfig":
        """Merge configuration dictionary with defaults and environment variables.

        Precedence order (highest to lowest):
        1. Environment variables
        2. Config file values
        3. Default values

        Args:
            config_dict: Configuration dictionary from file

        Returns:
            Configuration instance

        Raises:
            ConfigurationError: If configuration is invalid

        Example:
            >>> config = DateCalcConfig.merge_with_defaults({
            ...     "calculation": {"leap_year_rule": "legacy"}
            ... })
        """
        calculation_config = config_dict.get("calculation") or {}
        cli_config = config_dict.get("cli") or {}

        for section, values in (("calculation", calculation_config), ("cli", cli_config)):
            if not isinstance(values, dict):
                raise ConfigurationError(f"'{section}' must be a mapping")

        leap_year_rule = os.getenv(
            "DATECALC_LEAP_RULE",
            calculation_config.get("leap_year_rule", DEFAULT_LEAP_YEAR_RULE.value),
        )
        strict = os.getenv("DATECALC_STRICT") is not None or calculation_config.get(
            "strict", False
        )

        verbose = os.getenv("DATECALC_VERBOSE") is not None or cli_config.get(
            "verbose", False
        )
        json_output = os.getenv("DATECALC_JSON_OUTPUT") is not None or cli_config.get(
            "json_output", False
        )

        try:
            return cls(
                leap_year_rule=leap_year_rule,
                strict=strict,
                verbose=verbose,
                json_output=json_output,
            )
        except ConfigurationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def save_to_file(self, path: Optional[Path] = None):
        """Save configuration to YAML file.

        Args:
            path: Optional path to save to (default: ~/.datecalc/config.yaml)

        Raises:
            ConfigurationError: If save fails
        """
        config_path = path or self.get_default_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(config_path, "w") as f:
                yaml.dump(self.to_dict(), f, default_flow_style=False)
            logger.info(f"Configuration saved to {config_path}")
        except OSError as e:
            raise ConfigurationError(f"Failed to save configuration: {e}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary.

        Returns:
            Configuration as dictionary
        """
        return {
            "calculation": {
                "leap_year_rule": self.leap_year_rule.value,
                "strict": self.strict,
            },
            "cli": {
                "verbose": self.verbose,
                "json_output": self.json_output,
            },
        }

    def __repr__(self) -> str:
        return (
            f"DateCalcConfig("
            f"leap_year_rule={self.leap_year_rule.value!r}, "
            f"strict={self.strict}, "
            f"verbose={self.verbose}, "
            f"json_output={self.json_output}"
            ")"
        )


def load_config(config_path: Optional[Path] = None) -> DateCalcConfig:
    """Load configuration from file or defaults.

    Args:
        config_path: Optional path to config file

    Returns:
        Configuration instance

    Example:
        >>> from src.datecalc.config import load_config
        >>> config = load_config()
        >>> print(config.leap_year_rule)
    """
    return DateCalcConfig.load_from_file(config_path)

