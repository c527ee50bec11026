"""
propcheck: property-based and table-driven testing with rule-driven mocks.
"""

__version__ = "0.1.0"

from propcheck.app import ConcatenatingDependency, DependencyCapability, SomeApp
from propcheck.errors import (
    ConfigurationError,
    ConfiguredFailure,
    NullDependencyError,
    NullInputError,
    PropCheckError,
    PropertyFailedError,
    TableFailedError,
    UnregisteredTypeError,
)
from propcheck.generators import ArbitraryRegistry, GeneratorConfig, GeneratorSpec, default_registry
from propcheck.mocks import MockBehavior, MockDependency, Outcome, demo_behavior
from propcheck.runner import (
    PropertyRunner,
    TableRunner,
    TestOutcome,
    for_all,
    for_each_entry,
    range_table,
)
from propcheck.schemas import StructuredInput

__all__ = [
    "ArbitraryRegistry",
    "ConcatenatingDependency",
    "ConfigurationError",
    "ConfiguredFailure",
    "DependencyCapability",
    "GeneratorConfig",
    "GeneratorSpec",
    "MockBehavior",
    "MockDependency",
    "NullDependencyError",
    "NullInputError",
    "Outcome",
    "PropCheckError",
    "PropertyFailedError",
    "PropertyRunner",
    "SomeApp",
    "StructuredInput",
    "TableFailedError",
    "TableRunner",
    "TestOutcome",
    "UnregisteredTypeError",
    "default_registry",
    "demo_behavior",
    "for_all",
    "for_each_entry",
    "range_table",
]
