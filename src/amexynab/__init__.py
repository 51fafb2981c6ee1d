"""
Amex YNAB - Convert Amex CSV exports into YNAB import files.

This package maps the columns of a Dutch Amex CSV export, normalizes dates and
amounts, and writes the four column CSV format that YNAB imports.
"""

from .columns import DEFAULT_COLUMN_SPEC, MissingColumnsError, resolve_columns
from .converter import YNABConverter
from .csv_parser import AmexCSVReader, RecordReadError
from .models import (
    ColumnField,
    ColumnIndex,
    ColumnSpec,
    ConversionResult,
    FieldResult,
    TargetRecord,
)
from .output_formatter import RecordWriteError, SummaryFormatter, YNABWriter
from .transformer import transform_row

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_COLUMN_SPEC",
    "AmexCSVReader",
    "ColumnField",
    "ColumnIndex",
    "ColumnSpec",
    "ConversionResult",
    "FieldResult",
    "MissingColumnsError",
    "RecordReadError",
    "RecordWriteError",
    "SummaryFormatter",
    "TargetRecord",
    "YNABConverter",
    "YNABWriter",
    "resolve_columns",
    "transform_row",
]
