"""
Main converter class that drives an export through to YNAB format.
"""

import logging
from pathlib import Path
from typing import IO

from .columns import DEFAULT_COLUMN_SPEC, require_columns, resolve_columns
from .csv_parser import AmexCSVReader, RecordReadError
from .models import ColumnSpec, ConversionResult
from .output_formatter import RecordWriteError, SummaryFormatter, YNABWriter
from .transformer import transform_row

logger = logging.getLogger(__name__)


class YNABConverter:
    """Converts Amex CSV exports to YNAB import files."""

    def __init__(
        self,
        column_spec: ColumnSpec = DEFAULT_COLUMN_SPEC,
        csv_reader: AmexCSVReader | None = None,
    ):
        self.column_spec = column_spec
        self.csv_reader = csv_reader or AmexCSVReader()
        self.summary_formatter = SummaryFormatter()

    def convert(self, source: str | IO[str], target: IO[str]) -> ConversionResult:
        """
        Convert an export stream and write YNAB records to target.

        Args:
            source: Path or text stream of the export
            target: Text stream receiving the YNAB CSV

        Returns:
            ConversionResult object

        Raises:
            RecordReadError: If the header or a row cannot be read
            MissingColumnsError: If date, payee or amount is not in the header
            RecordWriteError: If a record cannot be written
        """
        records = self.csv_reader.iter_records(source)

        header = next(records, None)
        if header is None:
            raise RecordReadError("failed to read header: input is empty")

        index = resolve_columns(header, self.column_spec)
        require_columns(index)

        writer = YNABWriter(target)
        result = ConversionResult()
        try:
            writer.write_header()
            for row_number, row in enumerate(records, start=1):
                record = transform_row(row, index)
                if "date" in record.degraded_fields:
                    logger.warning(
                        f"Row {row_number}: could not parse date '{record.date}', keeping original text",
                    )
                if "amount" in record.degraded_fields:
                    logger.warning(
                        f"Row {row_number}: could not parse amount '{record.amount}', keeping original text",
                    )
                writer.write_record(record)
                result.record(row_number, record)
        except Exception:
            # Flush without replacing the error in flight.
            try:
                writer.flush()
            except RecordWriteError as e:
                logger.error(f"Failed to flush output after error: {e}")
            raise

        writer.flush()
        logger.debug(f"Converted {result.rows_written} rows")
        return result

    def convert_file(
        self,
        input_path: str | Path,
        output_path: str | Path,
    ) -> ConversionResult:
        """
        Convert an export file into a YNAB CSV file.

        Args:
            input_path: Path to the Amex CSV export
            output_path: Path of the YNAB CSV to create

        Returns:
            ConversionResult object
        """
        output_path = Path(output_path)
        with open(input_path, encoding=self.csv_reader.encoding, newline="") as source:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            logger.info(f"Converting {input_path} to {output_path}")
            with open(output_path, "w", encoding="utf-8", newline="") as target:
                return self.convert(source, target)

    def format_summary(
        self,
        result: ConversionResult,
        output_path: str | None = None,
    ) -> str:
        """Format summary information."""
        return self.summary_formatter.format_summary(result, output_path)
