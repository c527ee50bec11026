"""
Fixed input tables for table-mode runs.
"""

from typing import List, Optional
from uuid import UUID

from propcheck.config.schema import DEFAULT_TABLE_SIZE
from propcheck.schemas.structured_input import NIL_UUID, StructuredInput


def range_table(
    size: int = DEFAULT_TABLE_SIZE,
    text: Optional[str] = "",
    uid: UUID = NIL_UUID,
) -> List[StructuredInput]:
    """Entries with number = 0..size-1 and derived fields computed from it.

    Text and uid are fixed across the table (empty string and the nil
    UUID by default).
    """
    return [StructuredInput.derive(number, text=text, uid=uid) for number in range(size)]
