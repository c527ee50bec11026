"""
Layered configuration for property and table runs.
"""

from propcheck.config.environment import EnvironmentVariables
from propcheck.config.manager import ConfigurationManager
from propcheck.config.schema import MockConfig, RunnerConfig
from propcheck.config.yaml_parser import ConfigurationYAMLParser, YAMLParsingError

__all__ = [
    "ConfigurationManager",
    "ConfigurationYAMLParser",
    "EnvironmentVariables",
    "MockConfig",
    "RunnerConfig",
    "YAMLParsingError",
]
