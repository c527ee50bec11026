"""
Property-mode and table-mode test runners.
"""

from propcheck.runner.decorators import for_all, for_each_entry
from propcheck.runner.outcome import PropertyReport, TableReport, TestOutcome, evaluate
from propcheck.runner.property_runner import PropertyRunner
from propcheck.runner.table_data import range_table
from propcheck.runner.table_runner import TableRunner

__all__ = [
    "PropertyReport",
    "PropertyRunner",
    "TableReport",
    "TableRunner",
    "TestOutcome",
    "evaluate",
    "for_all",
    "for_each_entry",
    "range_table",
]
