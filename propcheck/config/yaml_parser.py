"""
YAML parser with validation for runner configuration files.

This module provides YAML parsing with detailed error reporting, line number
information, and structural validation for configuration files.
"""

import yaml
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .environment import parse_bool, parse_int
from .schema import RunnerConfig


TOP_LEVEL_KEYS = {
    'iterations', 'seed', 'table_size', 'workers', 'quiet_on_success',
    'log_level', 'log_file', 'generator', 'mock'
}

GENERATOR_KEYS = {'max_number', 'max_text_length', 'null_text_ratio'}

MOCK_KEYS = {'response', 'failure_rule', 'failure_trigger'}

TYPED_KEYS = {
    ('iterations',): int,
    ('seed',): int,
    ('table_size',): int,
    ('workers',): int,
    ('quiet_on_success',): bool,
    ('generator', 'max_number'): int,
    ('generator', 'max_text_length'): int,
    ('generator', 'null_text_ratio'): float,
    ('mock', 'failure_rule'): bool,
    ('mock', 'failure_trigger'): int,
}


class YAMLParsingError(Exception):
    """Custom exception for YAML parsing errors with enhanced context."""

    def __init__(self, message: str, file_path: Optional[Path] = None,
                 line_number: Optional[int] = None, column: Optional[int] = None):
        self.file_path = file_path
        self.line_number = line_number
        self.column = column

        error_parts = [message]

        if file_path:
            error_parts.append(f"File: {file_path}")

        if line_number is not None:
            if column is not None:
                error_parts.append(f"Line {line_number}, Column {column}")
            else:
                error_parts.append(f"Line {line_number}")

        super().__init__(" | ".join(error_parts))


class ConfigurationYAMLParser:
    """YAML parser for configuration files with validation and error reporting."""

    def parse_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Parse YAML configuration file with enhanced error reporting.

        Args:
            file_path: Path to YAML configuration file

        Returns:
            Dictionary containing parsed configuration

        Raises:
            YAMLParsingError: If YAML is invalid or file cannot be read
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                return self._load(f, file_path)

        except FileNotFoundError:
            raise YAMLParsingError("Configuration file not found", file_path)

        except PermissionError:
            raise YAMLParsingError("Permission denied reading configuration file", file_path)

        except UnicodeDecodeError as e:
            raise YAMLParsingError(f"File encoding error: {e}", file_path)

    def parse_string(self, yaml_content: str) -> Dict[str, Any]:
        """
        Parse YAML configuration from string with enhanced error reporting.

        Raises:
            YAMLParsingError: If YAML is invalid
        """
        return self._load(yaml_content, None)

    def _load(self, stream, file_path: Optional[Path]) -> Dict[str, Any]:
        try:
            content = yaml.safe_load(stream)
        except yaml.YAMLError as e:
            line_number = None
            column = None

            if hasattr(e, 'problem_mark') and e.problem_mark:
                line_number = e.problem_mark.line + 1  # YAML uses 0-based line numbers
                column = e.problem_mark.column + 1

            if hasattr(e, 'problem') and e.problem:
                message = f"YAML parsing error: {e.problem}"
            else:
                message = f"YAML parsing error: {str(e)}"

            raise YAMLParsingError(message, file_path, line_number, column)

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise YAMLParsingError("Configuration root must be a mapping", file_path)
        return content

    def validate_configuration_structure(self, config_dict: Dict[str, Any]) -> List[str]:
        """
        Validate configuration dictionary structure against expected schema.

        Typed values may also be ${VAR} placeholders; those are converted
        after environment substitution by coerce_substituted_values().

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        unknown_keys = set(config_dict.keys()) - TOP_LEVEL_KEYS
        if unknown_keys:
            errors.append(f"Unknown configuration keys: {', '.join(sorted(unknown_keys))}")

        for key in ('iterations', 'table_size', 'workers'):
            if key in config_dict and not _is_typed(config_dict[key], int):
                errors.append(f"{key} must be an integer")

        if config_dict.get('seed') is not None and not _is_typed(config_dict['seed'], int):
            errors.append("seed must be an integer")

        if 'quiet_on_success' in config_dict and not _is_typed(config_dict['quiet_on_success'], bool):
            errors.append("quiet_on_success must be a boolean")

        if 'generator' in config_dict:
            errors.extend(self._validate_generator_config(config_dict['generator']))

        if 'mock' in config_dict:
            errors.extend(self._validate_mock_config(config_dict['mock']))

        return errors

    def _validate_section(self, name: str, config: Any, expected_keys: set) -> List[str]:
        """Validate a nested section is a mapping with known keys."""
        if not isinstance(config, dict):
            return [f"{name} must be a dictionary"]

        unknown_keys = set(config.keys()) - expected_keys
        if unknown_keys:
            return [f"Unknown {name} keys: {', '.join(sorted(unknown_keys))}"]
        return []

    def _validate_generator_config(self, config: Any) -> List[str]:
        """Validate generator configuration section."""
        errors = self._validate_section('generator', config, GENERATOR_KEYS)
        if errors:
            return errors

        for key in ('max_number', 'max_text_length'):
            if key in config and not _is_typed(config[key], int):
                errors.append(f"generator.{key} must be an integer")

        if 'null_text_ratio' in config and not _is_typed(config['null_text_ratio'], float):
            errors.append("generator.null_text_ratio must be a number")

        return errors

    def _validate_mock_config(self, config: Any) -> List[str]:
        """Validate mock configuration section."""
        errors = self._validate_section('mock', config, MOCK_KEYS)
        if errors:
            return errors

        if 'response' in config and not isinstance(config['response'], str):
            errors.append("mock.response must be a string")

        if 'failure_rule' in config and not _is_typed(config['failure_rule'], bool):
            errors.append("mock.failure_rule must be a boolean")

        if 'failure_trigger' in config and not _is_typed(config['failure_trigger'], int):
            errors.append("mock.failure_trigger must be an integer")

        return errors

    def coerce_substituted_values(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Convert typed values that came from ${VAR} substitution to their types.

        Raises:
            ValueError: If a substituted value cannot be converted
        """
        result = dict(config_dict)
        for path, value_type in TYPED_KEYS.items():
            section = result
            for key in path[:-1]:
                if not isinstance(section.get(key), dict):
                    break
                section[key] = dict(section[key])
                section = section[key]
            else:
                key = path[-1]
                if isinstance(section.get(key), str):
                    section[key] = _convert(".".join(path), section[key], value_type)
        return result

    def serialize_to_yaml(self, config: RunnerConfig) -> str:
        """Serialize configuration to YAML."""
        return yaml.safe_dump(asdict(config), default_flow_style=False, sort_keys=False)

    def validate_and_parse_file(self, file_path: Path) -> Tuple[Dict[str, Any], List[str]]:
        """
        Parse and validate YAML configuration file in one step.

        Returns:
            Tuple of (parsed_config, validation_errors)

        Raises:
            YAMLParsingError: If YAML parsing fails
        """
        config_dict = self.parse_file(file_path)
        validation_errors = self.validate_configuration_structure(config_dict)
        return config_dict, validation_errors


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_placeholder(value: Any) -> bool:
    return isinstance(value, str) and '${' in value


def _is_typed(value: Any, value_type: type) -> bool:
    """Check value has value_type, allowing ${VAR} placeholders."""
    if _is_placeholder(value):
        return True
    if value_type is int:
        return _is_int(value)
    if value_type is float:
        return _is_int(value) or isinstance(value, float)
    return isinstance(value, value_type)


def _convert(name: str, raw: str, value_type: type) -> Any:
    if value_type is bool:
        return parse_bool(name, raw)
    if value_type is int:
        return parse_int(name, raw)
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"Invalid {name}: '{raw}' is not a number") from None
