"""
Field normalization for dates, amounts and memo text.
"""

import math
import re
from datetime import datetime

from .models import FieldResult

# Tried in order; the first pattern that parses wins. "01/02/2024" is
# therefore read as day/month.
DATE_FORMATS = (
    "%d-%m-%Y",
    "%d/%m/%Y",
    "%Y-%m-%d",
    "%m/%d/%Y",
    "%B %d, %Y",
    "%d %B %Y",
)

# Numeric days and months must be zero-padded, years four digits.
_DATE_SHAPES = {
    "%d-%m-%Y": re.compile(r"[0-9]{2}-[0-9]{2}-[0-9]{4}"),
    "%d/%m/%Y": re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}"),
    "%Y-%m-%d": re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}"),
    "%m/%d/%Y": re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}"),
    "%B %d, %Y": re.compile(r"[A-Za-z]+ [0-9]{1,2}, [0-9]{4}"),
    "%d %B %Y": re.compile(r"[0-9]{1,2} [A-Za-z]+ [0-9]{4}"),
}

MEMO_SEPARATOR = " | "
LOCATION_SEPARATOR = ", "

_AMOUNT_NOISE = re.compile(r"[^0-9.,\-]")


def normalize_date(value: str) -> FieldResult:
    """
    Convert a date to YYYY-MM-DD.

    Args:
        value: Raw date text from the export

    Returns:
        FieldResult with the canonical date, or the original text if no
        known format matches
    """
    for fmt in DATE_FORMATS:
        if not _DATE_SHAPES[fmt].fullmatch(value):
            continue
        try:
            parsed = datetime.strptime(value, fmt).date()
        except ValueError:
            continue
        return FieldResult.ok(parsed.isoformat())
    return FieldResult.degraded(value)


def clean_amount(value: str) -> str:
    """Strip currency noise and turn a decimal comma into a period."""
    cleaned = _AMOUNT_NOISE.sub("", value)
    if cleaned.count(",") == 1 and cleaned.count(".") <= 1:
        # A single comma next to at most one period: periods are thousands
        # separators and the comma is the decimal mark.
        cleaned = cleaned.replace(".", "").replace(",", ".")
    return cleaned


def invert_amount(value: str) -> FieldResult:
    """
    Negate an amount and format it with two decimals.

    Args:
        value: Raw amount text, e.g. "1.234,56" or "€ 5,00"

    Returns:
        FieldResult with the inverted amount, or the original text if it
        is not a finite number
    """
    try:
        amount = float(clean_amount(value))
    except ValueError:
        return FieldResult.degraded(value)
    if not math.isfinite(amount):
        return FieldResult.degraded(value)

    return FieldResult.ok(f"{-amount:.2f}")


def compose_location(location: str, postcode: str, country: str) -> str:
    """Join the non-empty location parts."""
    return LOCATION_SEPARATOR.join(part for part in (location, postcode, country) if part)


def compose_memo(memo: str, reference: str, location: str) -> str:
    """Build the YNAB memo from the memo, reference and location texts."""
    parts = []
    if memo:
        parts.append(memo)
    if reference:
        parts.append(f"Ref: {reference}")
    if location:
        parts.append(f"Location: {location}")
    return MEMO_SEPARATOR.join(parts)
