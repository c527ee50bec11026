"""
Unit tests for ArbitraryRegistry.
"""

import logging
import random

import pytest

from propcheck.errors import UnregisteredTypeError
from propcheck.generators.base import GeneratorSpec
from propcheck.generators.registry import ArbitraryRegistry, default_registry
from propcheck.generators.structured_input import structured_input_spec
from propcheck.schemas.structured_input import StructuredInput


def _constant_spec(type_key, value):
    return GeneratorSpec(type_key=type_key, produce=lambda source, config: value)


class TestArbitraryRegistry:
    """Test registration and lookup."""

    def test_lookup_registered(self):
        registry = ArbitraryRegistry()
        spec = structured_input_spec()

        registry.register(StructuredInput, spec)

        assert registry.lookup(StructuredInput) is spec
        assert registry.is_registered(StructuredInput)
        assert registry.registered_types() == [StructuredInput]

    def test_lookup_unregistered_raises(self):
        registry = ArbitraryRegistry()

        with pytest.raises(UnregisteredTypeError) as exc_info:
            registry.lookup(StructuredInput)

        assert exc_info.value.type_key is StructuredInput
        assert "StructuredInput" in str(exc_info.value)

    def test_reregistration_last_wins_and_warns(self, caplog):
        registry = ArbitraryRegistry()
        first = _constant_spec(int, 1)
        second = _constant_spec(int, 2)

        registry.register(int, first)
        with caplog.at_level(logging.WARNING, logger="propcheck.generators.registry"):
            registry.register(int, second)

        assert registry.lookup(int) is second
        assert "re-registered" in caplog.text

    def test_lookup_is_by_type_identity(self):
        class Sub(StructuredInput):
            pass

        registry = ArbitraryRegistry()
        registry.register(StructuredInput, structured_input_spec())

        assert not registry.is_registered(Sub)
        with pytest.raises(UnregisteredTypeError):
            registry.lookup(Sub)

    def test_registries_are_independent(self):
        first = ArbitraryRegistry()
        second = ArbitraryRegistry()

        first.register(int, _constant_spec(int, 1))

        assert not second.is_registered(int)


def test_default_registry_generates_structured_inputs():
    spec = default_registry().lookup(StructuredInput)

    value = spec.produce(random.Random(0), None)

    assert isinstance(value, StructuredInput)
