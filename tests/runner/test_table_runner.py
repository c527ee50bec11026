"""
Unit tests for TableRunner and range_table.

Covers report-all semantics, error capture, ordering under a thread
pool, expected failures and the iteration log sink.
"""

import logging
from decimal import Decimal
from unittest.mock import patch

import pytest

from propcheck.config.schema import RunnerConfig
from propcheck.errors import ConfiguredFailure, TableFailedError
from propcheck.mocks.behavior import demo_behavior
from propcheck.mocks.collaborator import MockDependency
from propcheck.runner.table_data import range_table
from propcheck.runner.table_runner import TableRunner
from propcheck.schemas.structured_input import NIL_UUID
from propcheck.utils.logging_config import ITERATION_LOGGER, IterationSink


@pytest.fixture
def runner():
    return TableRunner(RunnerConfig())


class TestRangeTable:
    """Test the fixed range table."""

    def test_default_size_and_order(self):
        table = range_table()

        assert len(table) == 1000
        assert [entry.number for entry in table] == list(range(1000))

    def test_entries_use_derivation(self):
        for entry in range_table(50):
            assert entry.is_even == (entry.number % 2 == 0)
            assert entry.half == Decimal(entry.number) / 2
            assert entry.text == ""
            assert entry.uid == NIL_UUID

    def test_empty_table(self):
        assert range_table(0) == []


class TestReportAll:
    """Test that every entry is reported and failures never abort the run."""

    def test_all_pass(self, runner):
        report = runner.run(range_table(20), lambda value: None)

        assert report.passed
        assert len(report.outcomes) == 20
        assert report.failures == []

    def test_errors_captured_and_run_continues(self, runner):
        def body(value):
            if value.number in (3, 7):
                raise ValueError(f"bad {value.number}")

        report = runner.run(range_table(10), body)

        assert not report.passed
        assert len(report.outcomes) == 10
        assert [o.index for o in report.failures] == [3, 7]
        assert all(isinstance(o.error, ValueError) for o in report.failures)

    def test_configured_failure_is_a_failure(self, runner):
        def body(value):
            return MockDependency(demo_behavior(failure_rule=True)).dependency_function(value)

        report = runner.run(range_table(1000), body)

        assert len(report.failures) == 1
        failure = report.failures[0]
        assert failure.value.number == 666
        assert failure.is_configured_failure

    def test_raise_for_failure_lists_every_failure(self, runner):
        report = runner.run(range_table(5), lambda value: value.number % 2 == 0)

        with pytest.raises(TableFailedError) as exc_info:
            report.raise_for_failure()

        message = str(exc_info.value)
        assert "2 of 5" in message
        assert "[1]" in message and "[3]" in message

    def test_empty_table_passes(self, runner):
        assert runner.run([], lambda value: False).passed


class TestWorkers:
    """Test thread pool execution."""

    def test_outcomes_keep_table_order(self, runner):
        report = runner.run(range_table(200), lambda value: value.number != 150, workers=8)

        assert [o.index for o in report.outcomes] == list(range(200))
        assert [o.value.number for o in report.outcomes] == list(range(200))
        assert [o.index for o in report.failures] == [150]

    def test_config_workers_used_by_default(self):
        runner = TableRunner(RunnerConfig(workers=4))

        with patch("propcheck.runner.table_runner.ThreadPoolExecutor") as executor:
            executor.return_value.__enter__.return_value.map.return_value = iter([])
            runner.run(range_table(3), lambda value: None)

        executor.assert_called_once_with(max_workers=4)


class TestExpectedFailures:
    """Test the expect_failure predicate."""

    def test_expected_configured_failure_passes(self, runner):
        behavior = demo_behavior(failure_rule=True)

        report = runner.run(
            range_table(1000),
            lambda value: MockDependency(behavior).dependency_function(value),
            expect_failure=lambda value: value.number == 666,
        )

        assert report.passed
        assert [o.value.number for o in report.expected_failures] == [666]

    def test_expected_failure_that_passes_is_reported(self, runner):
        report = runner.run(
            range_table(10), lambda value: None, expect_failure=lambda value: value.number == 4
        )

        assert [o.index for o in report.failures] == [4]
        assert report.failures[0].message == "expected failure did not occur"

    def test_raising_predicate_does_not_abort_run(self, runner):
        def predicate(value):
            if value.number == 2:
                raise RuntimeError("predicate broke")
            return False

        report = runner.run(range_table(5), lambda value: None, expect_failure=predicate)

        assert len(report.outcomes) == 5
        assert [o.index for o in report.failures] == [2]
        assert isinstance(report.failures[0].error, RuntimeError)

    def test_raising_predicate_with_workers(self, runner):
        def predicate(value):
            raise RuntimeError("predicate broke")

        report = runner.run(range_table(20), lambda value: None, expect_failure=predicate, workers=4)

        assert [o.index for o in report.failures] == list(range(20))


class TestIterationLog:
    """Test the per-entry log sink."""

    def test_one_line_per_entry(self, runner, caplog):
        with caplog.at_level(logging.INFO, logger=ITERATION_LOGGER):
            runner.run(range_table(4), lambda value: None)

        records = [r for r in caplog.records if r.name == ITERATION_LOGGER]
        assert [r.getMessage() for r in records] == ["0", "1", "2", "3"]

    def test_sink_flushed_once(self, runner):
        with patch.object(IterationSink, "flush") as flush:
            runner.run(range_table(4), lambda value: False)

        flush.assert_called_once()


def test_report_serialization(runner):
    report = runner.run(range_table(3), lambda value: value.number != 1)

    data = report.to_dict()

    assert data["mode"] == "table"
    assert data["total"] == 3
    assert data["failed"] == 1
    assert data["failures"][0]["index"] == 1
    assert "1 failed" in report.format_human()
