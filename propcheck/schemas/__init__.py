"""
Schemas for values flowing through the property-testing framework.
"""

from propcheck.schemas.structured_input import (
    MAX_NUMBER,
    NIL_UUID,
    StructuredInput,
)

__all__ = [
    "MAX_NUMBER",
    "NIL_UUID",
    "StructuredInput",
]
