"""
Decorators turning test bodies into zero-argument test functions.

Usage with pytest:
    @for_all(StructuredInput, iterations=1000)
    def test_round_trip(value):
        assert value.is_even == (value.number % 2 == 0)

    @for_each_entry(range_table(1000))
    def test_every_entry(value):
        ...
"""

import functools
import inspect
from typing import Any, Callable, Iterable, Optional

from propcheck.config.schema import RunnerConfig
from propcheck.generators.registry import ArbitraryRegistry, default_registry
from propcheck.runner.outcome import ExpectFailure
from propcheck.runner.property_runner import PropertyRunner
from propcheck.runner.table_runner import TableRunner


def for_all(
    type_key: type,
    iterations: Optional[int] = None,
    seed: Optional[int] = None,
    registry: Optional[ArbitraryRegistry] = None,
    config: Optional[RunnerConfig] = None,
    expect_failure: Optional[ExpectFailure] = None,
) -> Callable[[Callable[[Any], Any]], Callable[[], None]]:
    """Run the decorated body as a property; raise PropertyFailedError on failure."""
    def decorator(body):
        @functools.wraps(body)
        def wrapper():
            runner = PropertyRunner(registry or default_registry(), config)
            report = runner.run(
                type_key, body, iterations=iterations, seed=seed, expect_failure=expect_failure
            )
            report.raise_for_failure()
        # zero-argument signature for test collectors
        wrapper.__signature__ = inspect.Signature()
        return wrapper
    return decorator


def for_each_entry(
    entries: Iterable[Any],
    config: Optional[RunnerConfig] = None,
    expect_failure: Optional[ExpectFailure] = None,
    workers: Optional[int] = None,
) -> Callable[[Callable[[Any], Any]], Callable[[], None]]:
    """Run the decorated body over every entry; raise TableFailedError listing all failures."""
    entries = list(entries)

    def decorator(body):
        @functools.wraps(body)
        def wrapper():
            report = TableRunner(config).run(
                entries, body, expect_failure=expect_failure, workers=workers
            )
            report.raise_for_failure()
        # zero-argument signature for test collectors
        wrapper.__signature__ = inspect.Signature()
        return wrapper
    return decorator
