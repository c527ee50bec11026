"""
Mock collaborator.

MockDependency implements the same DependencyCapability as the real
dependency and answers every call from its configured MockBehavior. It
holds no state beyond that behavior, so a fresh instance per iteration
costs nothing.
"""

from typing import Optional

from propcheck.app.dependency import DependencyCapability
from propcheck.mocks.behavior import MockBehavior
from propcheck.schemas.structured_input import StructuredInput


class MockDependency(DependencyCapability):
    """Rule-driven stand-in for a DependencyCapability.

    Example:
        >>> mock = MockDependency(demo_behavior(failure_rule=True))
        >>> SomeApp().run(StructuredInput.derive(1), mock)
        'Working!'
    """

    def __init__(self, behavior: Optional[MockBehavior] = None):
        self.behavior = behavior or MockBehavior()

    def configure(self, behavior: MockBehavior) -> "MockDependency":
        """Replace the configured behavior."""
        self.behavior = behavior
        return self

    def dependency_function(self, value: StructuredInput) -> str:
        return self.behavior.select(value).resolve(value)
