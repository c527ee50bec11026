"""
Random generator for StructuredInput.

The integer field is drawn uniformly and the boolean and decimal fields
are derived from it. Text is drawn from a deliberately unconstrained
distribution: empty strings, control characters, astral code points and
None all occur, and all of them are valid inputs.
"""

import random
from typing import Optional
from uuid import UUID

from propcheck.generators.base import GeneratorConfig, GeneratorSpec
from propcheck.schemas.structured_input import StructuredInput


# (weight, first code point, last code point)
_CODE_POINT_RANGES = (
    (60, 0x20, 0x7E),        # printable ASCII
    (5, 0x00, 0x1F),         # C0 controls
    (25, 0xA0, 0xD7FF),      # BMP below the surrogate block
    (5, 0xE000, 0xFFFD),     # BMP above the surrogate block
    (5, 0x10000, 0x10FFFF),  # astral planes
)

_RANGE_WEIGHTS = [weight for weight, _, _ in _CODE_POINT_RANGES]


def draw_text(random_source: random.Random, config: GeneratorConfig) -> Optional[str]:
    """Draw a text value; None and "" are both possible."""
    if random_source.random() < config.null_text_ratio:
        return None

    length = random_source.randint(0, config.max_text_length)
    chars = []
    for _ in range(length):
        _, low, high = random_source.choices(_CODE_POINT_RANGES, weights=_RANGE_WEIGHTS)[0]
        chars.append(chr(random_source.randint(low, high)))
    return "".join(chars)


def draw_uuid(random_source: random.Random) -> UUID:
    """Draw a version-4 UUID from the supplied random source.

    Collisions are not guarded against.
    """
    return UUID(int=random_source.getrandbits(128), version=4)


def generate(random_source: random.Random, config: Optional[GeneratorConfig] = None) -> StructuredInput:
    """Draw one StructuredInput.

    Args:
        random_source: Random number source (seeded by the runner)
        config: Distribution parameters (defaults to GeneratorConfig())

    Returns:
        A StructuredInput whose is_even and half fields are derived from number
    """
    config = config or GeneratorConfig()
    number = random_source.randint(0, config.max_number)
    text = draw_text(random_source, config)
    return StructuredInput.derive(number, text=text, uid=draw_uuid(random_source))


def structured_input_spec() -> GeneratorSpec:
    """GeneratorSpec registering generate() for StructuredInput."""
    return GeneratorSpec(type_key=StructuredInput, produce=generate)
