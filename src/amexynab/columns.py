"""
Header resolution for Amex CSV exports.
"""

import logging
from collections.abc import Sequence

from .models import ColumnField, ColumnIndex, ColumnSpec

logger = logging.getLogger(__name__)


class MissingColumnsError(Exception):
    """Exception raised when required columns are not present in the header."""

    def __init__(self, columns: Sequence[ColumnField]):
        self.columns = list(columns)
        names = ", ".join(column.value for column in self.columns)
        super().__init__(f"required columns not found in the CSV file: {names}")


# Column names used by the Dutch Amex export
DEFAULT_COLUMN_SPEC = ColumnSpec(
    {
        ColumnField.DATE: ["Datum"],
        ColumnField.PAYEE: ["Omschrijving"],
        ColumnField.AMOUNT: ["Bedrag"],
        ColumnField.MEMO: ["Aanvullende informatie"],
        ColumnField.REFERENCE: ["Referentie"],
        ColumnField.LOCATION: ["Plaats"],
        ColumnField.POSTCODE: ["Postcode"],
        ColumnField.COUNTRY: ["Land"],
    },
)

REQUIRED_FIELDS = (ColumnField.DATE, ColumnField.PAYEE, ColumnField.AMOUNT)


def _normalize_name(name: str) -> str:
    return name.strip().lower()


def find_column_index(header: Sequence[str], names: Sequence[str]) -> int | None:
    """
    Find the first header position matching any of the given names.

    Matching is exact after trimming whitespace and lowercasing both sides.

    Args:
        header: Header cells in file order
        names: Accepted names for the column

    Returns:
        Position of the first match, or None if nothing matches
    """
    wanted = {_normalize_name(name) for name in names}
    for position, cell in enumerate(header):
        if _normalize_name(cell) in wanted:
            return position
    return None


def resolve_columns(header: Sequence[str], spec: ColumnSpec) -> ColumnIndex:
    """Map every column of a ColumnSpec to its position in the header."""
    positions = {
        column: find_column_index(header, spec.names_for(column))
        for column in spec.fields
    }
    logger.debug(
        "Resolved columns: "
        + ", ".join(f"{column.value}={position}" for column, position in positions.items()),
    )
    return ColumnIndex(positions)


def require_columns(
    index: ColumnIndex,
    required: Sequence[ColumnField] = REQUIRED_FIELDS,
) -> None:
    """Raise MissingColumnsError if any required column is absent."""
    missing = index.missing(required)
    if missing:
        raise MissingColumnsError(missing)
