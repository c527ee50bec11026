"""
Test Outcome and Report Data Models

Defines TestOutcome (one body invocation) and the PropertyReport and
TableReport aggregates produced by the two runner modes, plus the
evaluate() helper both runners use to turn a body call into an outcome.
"""

import json
import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional

from propcheck.errors import ConfiguredFailure, PropertyFailedError, TableFailedError


logger = logging.getLogger(__name__)


Body = Callable[[Any], Any]
ExpectFailure = Callable[[Any], bool]


def describe_value(value: Any) -> str:
    """Human-readable rendering of a runner input."""
    describe = getattr(value, "describe", None)
    if callable(describe):
        return describe()
    return repr(value)


def _value_to_dict(value: Any) -> Any:
    dump = getattr(value, "model_dump", None)
    if callable(dump):
        return dump(mode="json")
    return repr(value)


@dataclass
class TestOutcome:
    """Result of invoking a test body on one input.

    Attributes:
        passed: Final verdict for this invocation
        value: The input the body was called with
        index: Position of the input in the run
        error: Exception raised by the body, if any
        expected_failure: Whether the input was marked as expected to fail
        result: Value returned by the body, when it returned a string
        message: Explanation for failures that carry no exception
    """
    __test__ = False

    passed: bool
    value: Any = None
    index: int = 0
    error: Optional[BaseException] = None
    expected_failure: bool = False
    result: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def success(cls, result: Optional[str] = None) -> "TestOutcome":
        return cls(passed=True, result=result)

    @classmethod
    def failure(cls, message: str, error: Optional[BaseException] = None) -> "TestOutcome":
        return cls(passed=False, error=error, message=message)

    @property
    def is_configured_failure(self) -> bool:
        """True when the error was raised deliberately by a mock rule."""
        return isinstance(self.error, ConfiguredFailure)

    def reason(self) -> str:
        if self.message:
            return self.message
        if self.error is not None:
            return f"{type(self.error).__name__}: {self.error}"
        return "passed" if self.passed else "failed"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        d = {
            "index": self.index,
            "passed": self.passed,
            "value": _value_to_dict(self.value),
        }
        if self.expected_failure:
            d["expected_failure"] = True
        if self.error is not None:
            d["error"] = {"type": type(self.error).__name__, "message": str(self.error)}
            d["configured_failure"] = self.is_configured_failure
        if self.message:
            d["message"] = self.message
        return d


def evaluate(
    body: Body,
    value: Any,
    index: int = 0,
    expect_failure: Optional[ExpectFailure] = None,
) -> TestOutcome:
    """Invoke body on value and normalize the result to a TestOutcome.

    The body may return None or True (pass), False (fail), a string
    (pass, recorded as the result) or a TestOutcome. An exception raised
    by the body fails the invocation. So does an exception raised by the
    expect_failure predicate.
    """
    try:
        returned = body(value)
    except Exception as e:
        outcome = TestOutcome(passed=False, error=e)
    else:
        outcome = _normalize(returned)

    outcome = replace(outcome, value=value, index=index)

    if expect_failure is None:
        return outcome

    try:
        expected = expect_failure(value)
    except Exception as e:
        return replace(
            outcome,
            passed=False,
            error=e,
            message=f"expect_failure predicate raised {type(e).__name__}: {e}",
        )
    if expected:
        return _apply_expected_failure(outcome)
    return outcome


def _normalize(returned: Any) -> TestOutcome:
    if isinstance(returned, TestOutcome):
        return returned
    if returned is None or returned is True:
        return TestOutcome(passed=True)
    if returned is False:
        return TestOutcome(passed=False, message="test body returned False")
    if isinstance(returned, str):
        return TestOutcome(passed=True, result=returned)
    return TestOutcome(
        passed=False,
        message=f"unsupported test body return type: {type(returned).__name__}",
    )


def _apply_expected_failure(outcome: TestOutcome) -> TestOutcome:
    if not outcome.passed:
        return replace(outcome, passed=True, expected_failure=True)
    return replace(
        outcome,
        passed=False,
        expected_failure=True,
        message="expected failure did not occur",
    )


@dataclass
class PropertyReport:
    """Structured report from a property run.

    Attributes:
        type_name: Name of the generated type
        iterations_requested: Number of draws requested
        seed: Seed of the random source, for reproducing the run
        iterations_run: Number of draws actually checked
        failure: Outcome of the first failing iteration, if any
        timestamp: When the run started (UTC)
        duration_ms: How long the run took in milliseconds
    """
    type_name: str
    iterations_requested: int
    seed: int
    iterations_run: int = 0
    failure: Optional[TestOutcome] = None
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    duration_ms: int = 0

    @property
    def passed(self) -> bool:
        return self.failure is None

    @property
    def counterexample(self) -> Any:
        return self.failure.value if self.failure is not None else None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "mode": "property",
            "type": self.type_name,
            "passed": self.passed,
            "seed": self.seed,
            "iterations_requested": self.iterations_requested,
            "iterations_run": self.iterations_run,
            "failure": self.failure.to_dict() if self.failure is not None else None,
            "timestamp": self.timestamp,
            "duration_ms": self.duration_ms,
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize report to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def format_human(self) -> str:
        """Format report for human-readable console output."""
        if self.passed:
            return (
                f"✅ Property over {self.type_name}: passed "
                f"({self.iterations_run} iterations, seed {self.seed})"
            )
        return "\n".join([
            f"❌ Property over {self.type_name}: falsified after "
            f"{self.iterations_run} iteration(s) (seed {self.seed})",
            f"  ❌ {describe_value(self.failure.value)}",
            f"      → {self.failure.reason()}",
        ])

    def raise_for_failure(self) -> None:
        """Raise PropertyFailedError naming the counterexample if the run failed."""
        if self.passed:
            return
        raise PropertyFailedError(
            f"Falsified after {self.iterations_run} iteration(s) (seed {self.seed}): "
            f"{describe_value(self.failure.value)}: {self.failure.reason()}",
            report=self,
        ) from self.failure.error


@dataclass
class TableReport:
    """Structured report from a table run; one outcome per entry, in table order."""
    outcomes: List[TestOutcome] = field(default_factory=list)
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    duration_ms: int = 0

    @property
    def passed(self) -> bool:
        return all(outcome.passed for outcome in self.outcomes)

    @property
    def failures(self) -> List[TestOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.passed]

    @property
    def expected_failures(self) -> List[TestOutcome]:
        return [o for o in self.outcomes if o.passed and o.expected_failure]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "mode": "table",
            "passed": self.passed,
            "total": len(self.outcomes),
            "failed": len(self.failures),
            "expected_failures": len(self.expected_failures),
            "failures": [outcome.to_dict() for outcome in self.failures],
            "timestamp": self.timestamp,
            "duration_ms": self.duration_ms,
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize report to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def format_human(self, quiet_on_success: bool = True) -> str:
        """Format report for human-readable console output."""
        total = len(self.outcomes)
        failures = self.failures
        lines = []

        for outcome in self.outcomes:
            if outcome.passed and quiet_on_success:
                continue
            icon = "✅" if outcome.passed else "❌"
            lines.append(f"  {icon} [{outcome.index}] {describe_value(outcome.value)}")
            if not outcome.passed:
                lines.append(f"      → {outcome.reason()}")

        lines.append(f"\n  ✅ {total - len(failures)} passed")
        if self.expected_failures:
            lines.append(f"  ⚠ {len(self.expected_failures)} failed as expected")
        if failures:
            lines.append(f"  ❌ {len(failures)} failed")

        return "\n".join(lines)

    def raise_for_failure(self) -> None:
        """Raise TableFailedError listing every failing entry."""
        failures = self.failures
        if not failures:
            return
        details = "\n".join(
            f"  [{o.index}] {describe_value(o.value)}: {o.reason()}" for o in failures
        )
        raise TableFailedError(
            f"{len(failures)} of {len(self.outcomes)} table entries failed:\n{details}",
            report=self,
        )
