"""
Environment variable integration for runner configuration.

This module centralizes the environment variable names understood by the
configuration manager and converts their string values to typed settings.
"""

import os
from typing import Any, Dict, List


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class EnvironmentVariables:
    """Centralized environment variable definitions and utilities."""

    ITERATIONS = "PROPCHECK_ITERATIONS"
    SEED = "PROPCHECK_SEED"
    TABLE_SIZE = "PROPCHECK_TABLE_SIZE"
    WORKERS = "PROPCHECK_WORKERS"
    LOG_LEVEL = "PROPCHECK_LOG_LEVEL"
    FAILURE_RULE = "PROPCHECK_FAILURE_RULE"

    @classmethod
    def get_all_variables(cls) -> List[str]:
        """Get list of all supported environment variables."""
        return [
            cls.ITERATIONS,
            cls.SEED,
            cls.TABLE_SIZE,
            cls.WORKERS,
            cls.LOG_LEVEL,
            cls.FAILURE_RULE,
        ]

    @classmethod
    def get_variable_documentation(cls) -> Dict[str, str]:
        """Get documentation for all environment variables."""
        return {
            cls.ITERATIONS: "Number of property iterations (default: 100000)",
            cls.SEED: "Seed for the property runner's random source",
            cls.TABLE_SIZE: "Number of range-table entries (default: 1000)",
            cls.WORKERS: "Thread pool size for table runs (default: 1)",
            cls.LOG_LEVEL: "Default logging level (debug, info, warning, error)",
            cls.FAILURE_RULE: "Enable the mock failure rule (true/false)",
        }

    @classmethod
    def load(cls) -> Dict[str, Any]:
        """Read configuration overrides from the environment.

        Raises:
            ValueError: If a variable holds a value of the wrong type
        """
        env_config: Dict[str, Any] = {}

        for name, key in (
            (cls.ITERATIONS, "iterations"),
            (cls.SEED, "seed"),
            (cls.TABLE_SIZE, "table_size"),
            (cls.WORKERS, "workers"),
        ):
            if name in os.environ:
                env_config[key] = parse_int(name, os.environ[name])

        if cls.LOG_LEVEL in os.environ:
            env_config["log_level"] = os.environ[cls.LOG_LEVEL].lower()

        if cls.FAILURE_RULE in os.environ:
            env_config.setdefault("mock", {})["failure_rule"] = parse_bool(
                cls.FAILURE_RULE, os.environ[cls.FAILURE_RULE]
            )

        return env_config


def parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Invalid {name}: '{raw}' is not an integer") from None


def parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid {name}: '{raw}'. Use true or false")
