"""
Dependency capability consumed by the system under test.

SomeApp only ever sees a DependencyCapability; callers choose between the
real ConcatenatingDependency and a MockDependency when they construct the
call.
"""

from abc import ABC, abstractmethod

from propcheck.schemas.structured_input import StructuredInput


class DependencyCapability(ABC):
    """Single-operation dependency interface."""

    @abstractmethod
    def dependency_function(self, value: StructuredInput) -> str:
        """Produce a string for value."""
        ...


class ConcatenatingDependency(DependencyCapability):
    """The real dependency: concatenates every field of the input.

    A None text contributes nothing; booleans render as True/False.
    """

    def dependency_function(self, value: StructuredInput) -> str:
        return (
            (value.text or "")
            + str(value.number)
            + str(value.is_even)
            + str(value.uid)
            + str(value.half)
        )
