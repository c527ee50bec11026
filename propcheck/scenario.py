"""
Pass-through scenario.

The shared test body of the demo: for each input, build a fresh mock from
the configured behavior, inject it into SomeApp and check that the result
is the mock's configured response. The property and table suites wire this
body into the two runners from a RunnerConfig.
"""

import logging
from typing import Callable, Optional

from propcheck.app.some_app import SomeApp
from propcheck.config.schema import RunnerConfig
from propcheck.generators.registry import ArbitraryRegistry, default_registry
from propcheck.mocks.behavior import MockBehavior, demo_behavior
from propcheck.mocks.collaborator import MockDependency
from propcheck.runner.outcome import PropertyReport, TableReport, TestOutcome
from propcheck.runner.property_runner import PropertyRunner
from propcheck.runner.table_data import range_table
from propcheck.runner.table_runner import TableRunner
from propcheck.schemas.structured_input import StructuredInput


logger = logging.getLogger(__name__)


BehaviorFactory = Callable[[], MockBehavior]


def behavior_factory(config: RunnerConfig) -> BehaviorFactory:
    """Factory building the demo mock behavior described by config.mock."""
    mock = config.mock

    def factory() -> MockBehavior:
        return demo_behavior(
            failure_rule=mock.failure_rule,
            trigger=mock.failure_trigger,
            response=mock.response,
        )
    return factory


def pass_through_check(
    factory: BehaviorFactory,
    expected: str,
    app: Optional[SomeApp] = None,
) -> Callable[[StructuredInput], TestOutcome]:
    """Test body checking SomeApp returns the mock's response verbatim.

    Errors raised by the mock propagate out of the body so the runner
    decides how to treat them.
    """
    app = app or SomeApp()

    def body(value: StructuredInput) -> TestOutcome:
        dependency = MockDependency(factory())
        result = app.run(value, dependency)
        if result != expected:
            return TestOutcome.failure(f"expected {expected!r}, got {result!r}")
        return TestOutcome.success(result)
    return body


def failure_rule_matches(config: RunnerConfig) -> Optional[Callable[[StructuredInput], bool]]:
    """Predicate marking inputs the failure rule fails on, when the rule is active."""
    if not config.mock.failure_rule:
        return None
    trigger = config.mock.failure_trigger
    return lambda value: value.number == trigger


def run_property_suite(
    config: RunnerConfig,
    registry: Optional[ArbitraryRegistry] = None,
    expect_configured_failures: bool = False,
) -> PropertyReport:
    """Run the pass-through property over generated StructuredInput values."""
    body = pass_through_check(behavior_factory(config), config.mock.response)
    expect_failure = failure_rule_matches(config) if expect_configured_failures else None
    runner = PropertyRunner(registry or default_registry(), config)
    return runner.run(StructuredInput, body, expect_failure=expect_failure)


def run_table_suite(
    config: RunnerConfig,
    expect_configured_failures: bool = False,
) -> TableReport:
    """Run the pass-through check over the range table number = 0..table_size-1."""
    body = pass_through_check(behavior_factory(config), config.mock.response)
    expect_failure = failure_rule_matches(config) if expect_configured_failures else None
    return TableRunner(config).run(
        range_table(config.table_size), body, expect_failure=expect_failure
    )
