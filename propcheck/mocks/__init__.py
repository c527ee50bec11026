"""
Rule-driven mock collaborators.
"""

from propcheck.mocks.behavior import (
    DEFAULT_FAILURE_TRIGGER,
    DEFAULT_RESPONSE,
    MockBehavior,
    MockRule,
    Outcome,
    demo_behavior,
)
from propcheck.mocks.collaborator import MockDependency

__all__ = [
    "DEFAULT_FAILURE_TRIGGER",
    "DEFAULT_RESPONSE",
    "MockBehavior",
    "MockDependency",
    "MockRule",
    "Outcome",
    "demo_behavior",
]
