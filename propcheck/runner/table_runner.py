"""
Table-mode runner.

Calls a test body once per entry of a fixed, ordered table. Every entry
is reported: an exception raised for one entry is captured as that
entry's failure and the run continues with the next.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable, Optional

from propcheck.config.schema import RunnerConfig
from propcheck.runner.outcome import (
    Body,
    ExpectFailure,
    TableReport,
    TestOutcome,
    describe_value,
    evaluate,
)
from propcheck.utils.logging_config import (
    IterationSink,
    LoggingConfig,
    logging_config as default_logging_config,
)


logger = logging.getLogger(__name__)


class TableRunner:
    """Runs a test body over a fixed table of inputs.

    Usage:
        runner = TableRunner(RunnerConfig())
        report = runner.run(range_table(1000), body)
        report.raise_for_failure()
    """

    def __init__(
        self,
        config: Optional[RunnerConfig] = None,
        logging_config: Optional[LoggingConfig] = None,
    ):
        self.config = config or RunnerConfig()
        self._logging = logging_config or default_logging_config

    def run(
        self,
        entries: Iterable[Any],
        body: Body,
        expect_failure: Optional[ExpectFailure] = None,
        workers: Optional[int] = None,
    ) -> TableReport:
        """Check body against every entry, in order.

        Args:
            entries: Ordered table of inputs
            body: Test body called with each entry
            expect_failure: Predicate marking entries the body should fail on
            workers: Thread pool size (defaults to config.workers); outcomes
                keep table order regardless of completion order

        Returns:
            TableReport with one outcome per entry
        """
        entries = list(entries)
        workers = workers or self.config.workers
        report = TableReport()

        logger.debug(f"Table run: {len(entries)} entries, {workers} worker(s)")
        start_time = time.time()

        with self._logging.iteration_sink() as sink:
            def run_entry(indexed) -> TestOutcome:
                index, entry = indexed
                return self._run_entry(sink, body, entry, index, expect_failure)

            if workers > 1:
                with ThreadPoolExecutor(max_workers=workers) as pool:
                    report.outcomes = list(pool.map(run_entry, enumerate(entries)))
            else:
                report.outcomes = [run_entry(indexed) for indexed in enumerate(entries)]

        duration = time.time() - start_time
        report.duration_ms = int(duration * 1000)
        self._logging.log_operation_timing("Table run", duration)

        if report.failures:
            logger.error(f"{len(report.failures)} of {len(entries)} table entries failed")
        return report

    def _run_entry(
        self,
        sink: IterationSink,
        body: Body,
        entry: Any,
        index: int,
        expect_failure: Optional[ExpectFailure],
    ) -> TestOutcome:
        sink.record(getattr(entry, "number", index))
        outcome = evaluate(body, entry, index, expect_failure)
        if not outcome.passed:
            logger.warning(f"Entry {index} failed: {describe_value(entry)}: {outcome.reason()}")
        return outcome
