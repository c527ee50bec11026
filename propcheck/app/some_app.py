"""
System under test.

SomeApp.run validates its arguments and delegates unconditionally to the
injected dependency. Errors raised by the dependency propagate unchanged.
"""

import logging
from typing import Optional

from propcheck.app.dependency import DependencyCapability
from propcheck.errors import NullDependencyError, NullInputError
from propcheck.schemas.structured_input import StructuredInput


logger = logging.getLogger(__name__)


class SomeApp:
    """Pass-through application over a DependencyCapability."""

    def run(
        self,
        value: Optional[StructuredInput],
        dependency: Optional[DependencyCapability],
    ) -> str:
        """Return dependency.dependency_function(value) verbatim.

        Raises:
            NullInputError: If value is None
            NullDependencyError: If dependency is None
        """
        if value is None:
            raise NullInputError("SomeApp.run called without an input value")
        if dependency is None:
            raise NullDependencyError("SomeApp.run called without a dependency")

        logger.debug(f"Delegating number={value.number} to {type(dependency).__name__}")
        return dependency.dependency_function(value)
