"""
Mock behavior configuration.

A MockBehavior is a small interpreter: an ordered list of
(predicate, outcome) rules and a default outcome. The first rule whose
predicate matches the input decides the outcome; when none match, the
default applies.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Type

from propcheck.errors import ConfiguredFailure
from propcheck.schemas.structured_input import StructuredInput


DEFAULT_RESPONSE = "Working!"

DEFAULT_FAILURE_TRIGGER = 666


Predicate = Callable[[StructuredInput], bool]


@dataclass(frozen=True)
class Outcome:
    """Either "return value" or "fail with an error".

    Use the constructors rather than building instances directly:
        Outcome.returns("Working!")
        Outcome.fails("dependency offline")
        Outcome.raises(TimeoutError, "slow")
    """
    value: Optional[str] = None
    error_factory: Optional[Callable[[Optional[StructuredInput]], BaseException]] = None

    @classmethod
    def returns(cls, value: str) -> "Outcome":
        return cls(value=value)

    @classmethod
    def fails(cls, message: str) -> "Outcome":
        """Fail with a fresh ConfiguredFailure carrying the triggering input."""
        return cls(error_factory=lambda value: ConfiguredFailure(message, value))

    @classmethod
    def raises(cls, error_type: Type[BaseException], *args: Any) -> "Outcome":
        """Fail with a fresh error_type(*args) on every call."""
        return cls(error_factory=lambda value: error_type(*args))

    @property
    def is_failure(self) -> bool:
        return self.error_factory is not None

    def resolve(self, value: Optional[StructuredInput]) -> str:
        """Return the configured value or raise the configured error."""
        if self.error_factory is not None:
            raise self.error_factory(value)
        return self.value


@dataclass(frozen=True)
class MockRule:
    """A predicate and the outcome used when it matches."""
    predicate: Predicate
    outcome: Outcome
    description: str = ""


@dataclass
class MockBehavior:
    """Ordered rules plus a default outcome.

    Attributes:
        default: Outcome used when no rule matches
        rules: Rules in registration order
    """
    default: Outcome = field(default_factory=lambda: Outcome.returns(DEFAULT_RESPONSE))
    rules: List[MockRule] = field(default_factory=list)

    def when(self, predicate: Predicate, outcome: Outcome, description: str = "") -> "MockBehavior":
        """Append a rule and return self for chaining."""
        self.rules.append(MockRule(predicate, outcome, description))
        return self

    def select(self, value: Optional[StructuredInput]) -> Outcome:
        """Outcome for value: first matching rule, else the default."""
        if value is not None:
            for rule in self.rules:
                if rule.predicate(value):
                    return rule.outcome
        return self.default


def demo_behavior(
    failure_rule: bool = False,
    trigger: int = DEFAULT_FAILURE_TRIGGER,
    response: str = DEFAULT_RESPONSE,
) -> MockBehavior:
    """Canonical demo configuration.

    Args:
        failure_rule: Add the rule failing when number equals trigger
        trigger: Integer value that trips the failure rule
        response: Value returned by default

    Returns:
        MockBehavior returning response, optionally failing on trigger
    """
    behavior = MockBehavior(default=Outcome.returns(response))
    if failure_rule:
        behavior.when(
            lambda value: value.number == trigger,
            Outcome.fails(f"Simulated dependency failure for number {trigger}"),
            description=f"number == {trigger}",
        )
    return behavior
