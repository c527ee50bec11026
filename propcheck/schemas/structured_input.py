"""
StructuredInput Schema

The record type exercised by property and table runs. Two of its fields
(is_even and half) are derived from the integer field; both the random
generator and the range table build records through derive() so the
derivation is identical for generated and tabulated data.
"""

from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


MAX_NUMBER = 1024

NIL_UUID = UUID(int=0)


class StructuredInput(BaseModel):
    """Immutable five-field input record.

    Attributes:
        text: Arbitrary text; empty strings and None are valid values
        number: Bounded integer in [0, 1024]
        is_even: True when number is even
        uid: Unique identifier (version-4 style randomness)
        half: number / 2.0 as a Decimal
    """
    text: Optional[str] = Field(default=None, description="Arbitrary text value")
    number: int = Field(..., ge=0, le=MAX_NUMBER, description="Bounded integer")
    is_even: bool = Field(..., description="number % 2 == 0")
    uid: UUID = Field(default=NIL_UUID, description="Unique identifier")
    half: Decimal = Field(..., description="number / 2.0")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "text": "",
                "number": 7,
                "is_even": False,
                "uid": "00000000-0000-0000-0000-000000000000",
                "half": "3.5",
            }
        }

    @classmethod
    def derive(
        cls,
        number: int,
        text: Optional[str] = "",
        uid: Optional[UUID] = None,
    ) -> "StructuredInput":
        """Build a record whose derived fields are computed from number."""
        return cls(
            text=text,
            number=number,
            is_even=number % 2 == 0,
            uid=uid if uid is not None else NIL_UUID,
            half=Decimal(number / 2.0),
        )

    def describe(self) -> str:
        """Short rendering used in failure reports."""
        return (
            f"StructuredInput(number={self.number}, text={self.text!r}, "
            f"is_even={self.is_even}, uid={self.uid}, half={self.half})"
        )
