"""
Generator base types.

A GeneratorSpec ties a type to the procedure that draws one random value
of it. Runners never call the procedure directly; they consume the lazy
stream() so a spec can be shared between property runs with different
random sources.
"""

import random
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List

from propcheck.schemas.structured_input import MAX_NUMBER


@dataclass
class GeneratorConfig:
    """Distribution parameters for value generators.

    Out-of-range parameters are rejected at construction, so a generator
    built from a GeneratorConfig always produces valid values.

    Attributes:
        max_number: Upper bound (inclusive) for the integer field
        max_text_length: Longest text value drawn
        null_text_ratio: Probability that the text field is None
    """
    max_number: int = MAX_NUMBER
    max_text_length: int = 64
    null_text_ratio: float = 0.05

    def __post_init__(self):
        errors = self.validate()
        if errors:
            raise ValueError("Invalid generator configuration: " + "; ".join(errors))

    def validate(self) -> List[str]:
        """Validate distribution parameters and return list of errors."""
        errors = []

        if not _is_int(self.max_number) or not 0 <= self.max_number <= MAX_NUMBER:
            errors.append(f"max_number must be an integer between 0 and {MAX_NUMBER}")

        if not _is_int(self.max_text_length) or self.max_text_length < 0:
            errors.append("max_text_length must be a non-negative integer")

        ratio = self.null_text_ratio
        if isinstance(ratio, bool) or not isinstance(ratio, (int, float)) or not 0.0 <= ratio <= 1.0:
            errors.append("null_text_ratio must be a number between 0.0 and 1.0")

        return errors


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class GeneratorSpec:
    """Associates a type with the procedure that produces its values.

    Attributes:
        type_key: The type this spec generates
        produce: Callable drawing one value from (random_source, config)
    """
    type_key: type
    produce: Callable[[random.Random, GeneratorConfig], Any]

    def stream(
        self,
        random_source: random.Random,
        config: GeneratorConfig,
    ) -> Iterator[Any]:
        """Yield an unbounded sequence of values drawn from random_source."""
        while True:
            yield self.produce(random_source, config)
