"""
Value generators and the arbitrary registry.
"""

from propcheck.generators.base import GeneratorConfig, GeneratorSpec
from propcheck.generators.registry import ArbitraryRegistry, default_registry
from propcheck.generators.structured_input import generate, structured_input_spec

__all__ = [
    "ArbitraryRegistry",
    "GeneratorConfig",
    "GeneratorSpec",
    "default_registry",
    "generate",
    "structured_input_spec",
]
