"""
CSV reading for Amex exports.
"""

import csv
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import IO

logger = logging.getLogger(__name__)

_BOM = "\ufeff"


class RecordReadError(Exception):
    """Exception raised when a record cannot be read from the export."""


class AmexCSVReader:
    """Streaming reader for Amex CSV export files."""

    def __init__(
        self,
        encoding: str = "utf-8-sig",
        delimiter: str = ",",
    ):
        self.encoding = encoding
        self.delimiter = delimiter

    def iter_records(self, source: str | Path | IO[str]) -> Iterator[list[str]]:
        """
        Read an export record by record.

        The first record yielded is the header row. Every following record
        must have as many fields as the header. Blank lines are skipped and
        cells are returned as the exact text found in the file.

        Args:
            source: Path to the CSV file or an open text stream

        Yields:
            Each record as a list of strings

        Raises:
            RecordReadError: If the input is empty or a row cannot be read
        """
        if isinstance(source, (str, Path)):
            with open(source, encoding=self.encoding, newline="") as f:
                yield from self._read(f)
        else:
            yield from self._read(source)

    def _read(self, lines: Iterable[str]) -> Iterator[list[str]]:
        reader = csv.reader(lines, delimiter=self.delimiter, strict=True)
        width = None
        count = 0
        while True:
            try:
                record = next(reader, None)
            except (csv.Error, UnicodeDecodeError) as e:
                stage = "header" if width is None else "row"
                raise RecordReadError(
                    f"failed to read {stage}: line {reader.line_num}: {e}",
                ) from e

            if record is None:
                break
            if not record:
                continue

            if width is None:
                if record[0].startswith(_BOM):
                    record[0] = record[0][len(_BOM) :]
                width = len(record)
            elif len(record) != width:
                raise RecordReadError(
                    f"failed to read row: line {reader.line_num}: "
                    f"expected {width} fields, got {len(record)}",
                )

            count += 1
            yield record

        if width is None:
            raise RecordReadError("failed to read header: input is empty")
        logger.debug(f"Read {count} records")
