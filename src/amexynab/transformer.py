"""
Row transformation from Amex export rows to YNAB records.
"""

from collections.abc import Sequence

from .models import ColumnField, ColumnIndex, TargetRecord
from .normalizers import compose_location, compose_memo, invert_amount, normalize_date


def transform_row(row: Sequence[str], index: ColumnIndex) -> TargetRecord:
    """
    Transform a single export row into a YNAB record.

    Args:
        row: Cells of one data row
        index: Resolved column positions; date, payee and amount must be present

    Returns:
        TargetRecord. Dates and amounts that cannot be parsed keep their
        original text and are listed in ``degraded_fields``.
    """
    date = normalize_date(index.cell(row, ColumnField.DATE))
    amount = invert_amount(index.cell(row, ColumnField.AMOUNT))

    location = compose_location(
        index.cell(row, ColumnField.LOCATION),
        index.cell(row, ColumnField.POSTCODE),
        index.cell(row, ColumnField.COUNTRY),
    )
    memo = compose_memo(
        index.cell(row, ColumnField.MEMO),
        index.cell(row, ColumnField.REFERENCE),
        location,
    )

    degraded = []
    if not date.parsed:
        degraded.append("date")
    if not amount.parsed:
        degraded.append("amount")

    return TargetRecord(
        date=date.text,
        payee=index.cell(row, ColumnField.PAYEE),
        memo=memo,
        amount=amount.text,
        degraded_fields=tuple(degraded),
    )
