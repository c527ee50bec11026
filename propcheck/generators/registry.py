"""
Arbitrary registry.

Maps a type to the GeneratorSpec used to draw values of it. The registry
is an explicit object handed to the PropertyRunner; it is populated once
before the first property run and only read afterwards.
"""

import logging
from typing import Dict, List, Optional

from propcheck.errors import UnregisteredTypeError
from propcheck.generators.base import GeneratorSpec


logger = logging.getLogger(__name__)


class ArbitraryRegistry:
    """Registry of generator specs keyed by type identity.

    Usage:
        registry = ArbitraryRegistry()
        registry.register(StructuredInput, structured_input_spec())
        spec = registry.lookup(StructuredInput)
    """

    def __init__(self, specs: Optional[Dict[type, GeneratorSpec]] = None):
        self._specs: Dict[type, GeneratorSpec] = dict(specs or {})

    def register(self, type_key: type, spec: GeneratorSpec) -> None:
        """Register spec for type_key.

        Re-registering a type replaces the previous spec (last wins). The
        replacement is logged because a double registration is usually
        unintended.
        """
        if type_key in self._specs:
            logger.warning(
                f"Generator for {getattr(type_key, '__name__', type_key)} "
                f"re-registered; previous spec replaced"
            )
        self._specs[type_key] = spec

    def lookup(self, type_key: type) -> GeneratorSpec:
        """Return the GeneratorSpec registered for type_key.

        Raises:
            UnregisteredTypeError: If nothing is registered for type_key
        """
        try:
            return self._specs[type_key]
        except KeyError:
            raise UnregisteredTypeError(type_key) from None

    def is_registered(self, type_key: type) -> bool:
        return type_key in self._specs

    def registered_types(self) -> List[type]:
        return list(self._specs.keys())


def default_registry() -> ArbitraryRegistry:
    """Registry with the built-in StructuredInput generator."""
    from propcheck.generators.structured_input import structured_input_spec
    from propcheck.schemas.structured_input import StructuredInput

    registry = ArbitraryRegistry()
    registry.register(StructuredInput, structured_input_spec())
    return registry
