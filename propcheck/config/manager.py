"""
Configuration Manager for property and table runs.

This module handles loading, validation, and merging of configuration from multiple sources:
- System defaults
- User configuration (~/.propcheck/config.yaml)
- Project configuration (./.propcheck/config.yaml)
- Explicit configuration (--config file.yaml)
- Environment variables
- CLI arguments (highest precedence)
"""

import json
import logging
import os
import re
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Optional

from propcheck.errors import ConfigurationError
from propcheck.generators.base import GeneratorConfig

from .environment import EnvironmentVariables
from .schema import MockConfig, RunnerConfig
from .yaml_parser import ConfigurationYAMLParser, YAMLParsingError


logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".propcheck"


class ConfigurationManager:
    """Manages configuration loading, validation, and environment variable integration."""

    def __init__(self,
                 user_config_path: Optional[Path] = None,
                 project_config_path: Optional[Path] = None):
        self.user_config_path = user_config_path or Path.home() / CONFIG_DIR_NAME / "config.yaml"
        self.project_config_path = project_config_path or Path.cwd() / CONFIG_DIR_NAME / "config.yaml"
        self.yaml_parser = ConfigurationYAMLParser()

    def load_configuration(self,
                           config_file: Optional[str] = None,
                           cli_overrides: Optional[Dict[str, Any]] = None) -> RunnerConfig:
        """
        Load configuration from all sources with proper precedence.

        Precedence order (highest to lowest):
        1. CLI arguments (cli_overrides)
        2. Environment variables
        3. Explicit config file (--config)
        4. Project config (./.propcheck/config.yaml)
        5. User config (~/.propcheck/config.yaml)
        6. System defaults

        Args:
            config_file: Optional explicit configuration file path
            cli_overrides: Dictionary of CLI argument overrides (None values are ignored)

        Returns:
            RunnerConfig: Merged and validated configuration

        Raises:
            ConfigurationError: If a source is unreadable or the result is invalid
        """
        config_dict = self._get_default_config()

        for path in (self.user_config_path, self.project_config_path):
            if path.exists():
                logger.debug(f"Loading configuration from {path}")
                config_dict = self._merge_configs(config_dict, self._load_yaml_file(path))

        if config_file:
            config_dict = self._merge_configs(config_dict, self._load_yaml_file(Path(config_file)))

        try:
            env_overrides = EnvironmentVariables.load()
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        config_dict = self._merge_configs(config_dict, env_overrides)

        if cli_overrides:
            config_dict = self._merge_configs(config_dict, _drop_none(cli_overrides))

        config_dict = self.substitute_environment_variables(config_dict)

        try:
            config_dict = self.yaml_parser.coerce_substituted_values(config_dict)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

        try:
            config = self._dict_to_config(config_dict)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Failed to create configuration object: {e}") from e

        try:
            errors = config.validate()
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
        if errors:
            raise ConfigurationError(
                "Invalid configuration:\n" + "\n".join(f"  - {error}" for error in errors)
            )

        return config

    def substitute_environment_variables(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Substitute ${VAR} and ${VAR:-default} syntax with environment variable values.

        Raises:
            ConfigurationError: If a required environment variable is missing
        """
        pattern = r'\$\{([^}]+)\}'

        def replace_var(match):
            var_expr = match.group(1)

            if ':-' in var_expr:
                var_name, default_value = var_expr.split(':-', 1)
                return os.environ.get(var_name, default_value)

            if var_expr not in os.environ:
                raise ConfigurationError(f"Required environment variable '{var_expr}' is not set")
            return os.environ[var_expr]

        def substitute_recursive(obj):
            if isinstance(obj, dict):
                return {k: substitute_recursive(v) for k, v in obj.items()}
            elif isinstance(obj, list):
                return [substitute_recursive(item) for item in obj]
            elif isinstance(obj, str):
                return re.sub(pattern, replace_var, obj)
            return obj

        return substitute_recursive(config_dict)

    def save_configuration(self, config: Optional[RunnerConfig], file_path: str) -> None:
        """Save configuration to a YAML file."""
        Path(file_path).parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, 'w', encoding='utf-8') as f:
            f.write(self.generate_default_config(config))

    def generate_default_config(self, config: Optional[RunnerConfig] = None) -> str:
        """Generate configuration YAML with comments."""
        config_dict = asdict(config or RunnerConfig())
        generator = config_dict['generator']
        mock = config_dict['mock']

        return f"""# propcheck configuration
#
# Any value may reference the environment as ${{VAR}} or ${{VAR:-default}};
# numeric and boolean settings are converted after substitution.

# Number of random draws per property run
iterations: {config_dict['iterations']}

# Seed for the property runner (null picks a fresh seed per run)
seed: {_yaml_scalar(config_dict['seed'])}

# Number of entries in the range table (0..table_size-1)
table_size: {config_dict['table_size']}

# Thread pool size for table runs
workers: {config_dict['workers']}

# Only print failures
quiet_on_success: {_yaml_scalar(config_dict['quiet_on_success'])}

# Logging level (debug, info, warning, error)
log_level: {config_dict['log_level']}
log_file: {_yaml_scalar(config_dict['log_file'])}

generator:
  max_number: {generator['max_number']}
  max_text_length: {generator['max_text_length']}
  null_text_ratio: {generator['null_text_ratio']}

mock:
  response: {_yaml_scalar(mock['response'])}
  # Fail the dependency call when number == failure_trigger
  failure_rule: {_yaml_scalar(mock['failure_rule'])}
  failure_trigger: {mock['failure_trigger']}
"""

    def _get_default_config(self) -> Dict[str, Any]:
        """Get system default configuration values."""
        return asdict(RunnerConfig())

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load and parse YAML configuration file with enhanced error reporting."""
        try:
            config_dict, validation_errors = self.yaml_parser.validate_and_parse_file(file_path)
        except YAMLParsingError as e:
            raise ConfigurationError(str(e)) from e

        if validation_errors:
            raise ConfigurationError(
                f"Configuration validation errors in {file_path}:\n"
                + "\n".join(f"  - {error}" for error in validation_errors)
            )

        return config_dict

    def _merge_configs(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge configuration dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> RunnerConfig:
        """Convert configuration dictionary to RunnerConfig object."""
        values = dict(config_dict)
        generator = GeneratorConfig(**values.pop('generator', {}))
        mock = MockConfig(**values.pop('mock', {}))
        return RunnerConfig(generator=generator, mock=mock, **values)


def _drop_none(overrides: Dict[str, Any]) -> Dict[str, Any]:
    result = {}
    for key, value in overrides.items():
        if isinstance(value, dict):
            value = _drop_none(value)
            if not value:
                continue
        elif value is None:
            continue
        result[key] = value
    return result


def _yaml_scalar(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return json.dumps(value)
    return str(value)
