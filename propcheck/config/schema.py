"""
Configuration schema and data models for property and table runs.

This module defines the configuration data structures for:
- Runner settings (iteration count, seed, table size, workers)
- Generator distribution parameters
- Mock collaborator behavior (default response, failure rule)
- Logging
"""

from dataclasses import dataclass, field
from typing import List, Optional

from propcheck.generators.base import GeneratorConfig
from propcheck.mocks.behavior import DEFAULT_FAILURE_TRIGGER, DEFAULT_RESPONSE
from propcheck.schemas.structured_input import MAX_NUMBER
from propcheck.utils.logging_config import LogLevel


DEFAULT_ITERATIONS = 100_000

DEFAULT_TABLE_SIZE = 1000


@dataclass
class MockConfig:
    """Configuration for the demo mock collaborator.

    Attributes:
        response: Value returned when no rule matches
        failure_rule: Whether the failure rule is active
        failure_trigger: Integer value that trips the failure rule
    """
    response: str = DEFAULT_RESPONSE
    failure_rule: bool = False
    failure_trigger: int = DEFAULT_FAILURE_TRIGGER


@dataclass
class RunnerConfig:
    """Complete configuration for property and table runs."""

    # Runner settings
    iterations: int = DEFAULT_ITERATIONS
    seed: Optional[int] = None
    table_size: int = DEFAULT_TABLE_SIZE
    workers: int = 1
    quiet_on_success: bool = True

    # Logging
    log_level: str = LogLevel.WARNING.value
    log_file: Optional[str] = None

    # Nested sections
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    mock: MockConfig = field(default_factory=MockConfig)

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if self.iterations < 0:
            errors.append("iterations must be non-negative")

        if self.table_size < 0:
            errors.append("table_size must be non-negative")
        elif self.table_size > MAX_NUMBER + 1:
            errors.append(f"table_size must not exceed {MAX_NUMBER + 1}")

        if self.workers < 1:
            errors.append("workers must be at least 1")

        try:
            LogLevel(self.log_level)
        except ValueError:
            valid_levels = [l.value for l in LogLevel]
            errors.append(f"Invalid log_level '{self.log_level}'. Valid options: {valid_levels}")

        errors.extend(f"generator.{error}" for error in self.generator.validate())

        if not 0 <= self.mock.failure_trigger <= MAX_NUMBER:
            errors.append(f"mock.failure_trigger must be between 0 and {MAX_NUMBER}")

        return errors
