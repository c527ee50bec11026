"""
Property-mode runner.

Draws N values from the generator registered for a type and checks a test
body against each. The run is fail-fast: the first failing iteration ends
it and its input is reported as the counterexample. Failing inputs are
reported as drawn; no shrinking is attempted.
"""

import logging
import random
import time
from typing import Optional

from propcheck.config.schema import RunnerConfig
from propcheck.generators.registry import ArbitraryRegistry
from propcheck.runner.outcome import (
    Body,
    ExpectFailure,
    PropertyReport,
    describe_value,
    evaluate,
)
from propcheck.utils.logging_config import LoggingConfig, logging_config as default_logging_config


logger = logging.getLogger(__name__)


class PropertyRunner:
    """Runs property checks over registered generators.

    Usage:
        runner = PropertyRunner(default_registry(), RunnerConfig(iterations=1000))
        report = runner.run(StructuredInput, body)
        report.raise_for_failure()
    """

    def __init__(
        self,
        registry: ArbitraryRegistry,
        config: Optional[RunnerConfig] = None,
        logging_config: Optional[LoggingConfig] = None,
    ):
        """Initialize the runner.

        Args:
            registry: Registry consulted for the generator of each run
            config: Runner configuration (defaults to RunnerConfig())
            logging_config: Provider of the iteration sink
        """
        self.registry = registry
        self.config = config or RunnerConfig()
        self._logging = logging_config or default_logging_config

    def run(
        self,
        type_key: type,
        body: Body,
        iterations: Optional[int] = None,
        seed: Optional[int] = None,
        expect_failure: Optional[ExpectFailure] = None,
    ) -> PropertyReport:
        """Check body against freshly drawn values of type_key.

        Args:
            type_key: Registered type to draw values of
            body: Test body called with each value
            iterations: Number of draws (defaults to config.iterations)
            seed: Random seed (defaults to config.seed, else a fresh seed)
            expect_failure: Predicate marking inputs the body should fail on

        Returns:
            PropertyReport; failed when any iteration failed

        Raises:
            UnregisteredTypeError: If no generator is registered for type_key
            ValueError: If iterations is negative or the generator configuration
                was made invalid after construction
        """
        spec = self.registry.lookup(type_key)

        generator_errors = self.config.generator.validate()
        if generator_errors:
            raise ValueError("Invalid generator configuration: " + "; ".join(generator_errors))

        if iterations is None:
            iterations = self.config.iterations
        if iterations < 0:
            raise ValueError(f"iterations must be non-negative, got {iterations}")

        seed = self._resolve_seed(seed)
        random_source = random.Random(seed)
        type_name = getattr(type_key, "__name__", repr(type_key))
        report = PropertyReport(type_name=type_name, iterations_requested=iterations, seed=seed)

        logger.debug(f"Property run over {type_name}: {iterations} iterations, seed {seed}")
        start_time = time.time()

        with self._logging.iteration_sink() as sink:
            values = spec.stream(random_source, self.config.generator)
            # range comes first so zip stops before drawing an extra value
            for index, value in zip(range(iterations), values):
                sink.record(getattr(value, "number", index))
                outcome = evaluate(body, value, index, expect_failure)
                report.iterations_run += 1

                if not outcome.passed:
                    report.failure = outcome
                    logger.error(
                        f"Property over {type_name} falsified at iteration {index} "
                        f"(seed {seed}): {describe_value(value)}: {outcome.reason()}"
                    )
                    break

        duration = time.time() - start_time
        report.duration_ms = int(duration * 1000)
        self._logging.log_operation_timing(f"Property run over {type_name}", duration)
        return report

    def _resolve_seed(self, seed: Optional[int]) -> int:
        if seed is not None:
            return seed
        if self.config.seed is not None:
            return self.config.seed
        return random.SystemRandom().getrandbits(32)
