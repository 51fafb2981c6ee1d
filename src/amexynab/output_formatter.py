"""
Output formatting for YNAB import files.
"""

import csv
import logging
from typing import IO

from .models import ConversionResult, TargetRecord

logger = logging.getLogger(__name__)

YNAB_HEADER = ("Date", "Payee", "Memo", "Amount")


class RecordWriteError(Exception):
    """Exception raised when a record cannot be written to the output."""


class YNABWriter:
    """Writes records in the four column YNAB CSV format."""

    def __init__(self, stream: IO[str]):
        self.stream = stream
        self.writer = csv.writer(stream, lineterminator="\n")

    def write_header(self) -> None:
        try:
            self.writer.writerow(YNAB_HEADER)
        except (OSError, csv.Error) as e:
            raise RecordWriteError(f"failed to write header: {e}") from e

    def write_record(self, record: TargetRecord) -> None:
        try:
            self.writer.writerow(record.as_row())
        except (OSError, csv.Error) as e:
            raise RecordWriteError(f"failed to write row: {e}") from e

    def flush(self) -> None:
        try:
            self.stream.flush()
        except OSError as e:
            raise RecordWriteError(f"failed to flush output: {e}") from e


class SummaryFormatter:
    """Formats summary information."""

    @staticmethod
    def format_summary(
        result: ConversionResult,
        output_path: str | None = None,
    ) -> str:
        """Format a summary of a conversion.

        Args:
            result: ConversionResult object
            output_path: Optional path the records were written to
        """
        lines = []
        lines.append("=== YNAB Conversion Summary ===")
        lines.append(f"Rows converted: {result.rows_written}")
        if output_path:
            lines.append(f"Output file: {output_path}")

        if result.has_degraded_rows:
            lines.append("")
            lines.append("Values kept as in the export (please check manually):")
            if result.degraded_dates:
                rows = ", ".join(str(row) for row in result.degraded_dates)
                lines.append(f"  • Dates in rows: {rows}")
            if result.degraded_amounts:
                rows = ", ".join(str(row) for row in result.degraded_amounts)
                lines.append(f"  • Amounts in rows: {rows}")

        return "\n".join(lines)
