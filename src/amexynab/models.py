"""
Data models for Amex to YNAB conversion.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


class ColumnField(Enum):
    """Logical source columns the converter knows about."""

    DATE = "date"
    PAYEE = "payee"
    AMOUNT = "amount"
    MEMO = "memo"
    REFERENCE = "reference"
    LOCATION = "location"
    POSTCODE = "postcode"
    COUNTRY = "country"


@dataclass(frozen=True)
class ColumnSpec:
    """Accepted header names for each logical column."""

    synonyms: Mapping[ColumnField, Sequence[str]]

    def __post_init__(self):
        object.__setattr__(
            self,
            "synonyms",
            MappingProxyType(
                {column: tuple(names) for column, names in self.synonyms.items()},
            ),
        )

    @property
    def fields(self) -> tuple[ColumnField, ...]:
        return tuple(self.synonyms)

    def names_for(self, column: ColumnField) -> tuple[str, ...]:
        """Return the header names accepted for a column."""
        return self.synonyms.get(column, ())


@dataclass(frozen=True)
class ColumnIndex:
    """Positions of logical columns in a source header (None when absent)."""

    positions: Mapping[ColumnField, int | None]

    def __post_init__(self):
        object.__setattr__(self, "positions", MappingProxyType(dict(self.positions)))

    def position(self, column: ColumnField) -> int | None:
        return self.positions.get(column)

    def cell(self, row: Sequence[str], column: ColumnField) -> str:
        """Return the raw cell for a column, or an empty string if absent."""
        position = self.position(column)
        if position is None:
            return ""
        return row[position]

    def missing(self, columns: Iterable[ColumnField]) -> list[ColumnField]:
        """Return the given columns that did not resolve, in order."""
        return [column for column in columns if self.position(column) is None]


@dataclass(frozen=True)
class FieldResult:
    """Outcome of normalizing one field.

    ``parsed`` is False when the value could not be interpreted and
    ``text`` holds the original input unchanged.
    """

    text: str
    parsed: bool

    @classmethod
    def ok(cls, text: str) -> "FieldResult":
        return cls(text=text, parsed=True)

    @classmethod
    def degraded(cls, original: str) -> "FieldResult":
        return cls(text=original, parsed=False)


@dataclass(frozen=True)
class TargetRecord:
    """A single row in YNAB import format."""

    date: str
    payee: str
    memo: str
    amount: str
    degraded_fields: tuple[str, ...] = ()

    def as_row(self) -> list[str]:
        """Return the output cells in YNAB column order."""
        return [self.date, self.payee, self.memo, self.amount]


@dataclass
class ConversionResult:
    """Result of converting one export."""

    rows_written: int = 0
    degraded_dates: list[int] = field(default_factory=list)
    degraded_amounts: list[int] = field(default_factory=list)

    def record(self, row_number: int, record: TargetRecord) -> None:
        """Account for a written row."""
        self.rows_written += 1
        if "date" in record.degraded_fields:
            self.degraded_dates.append(row_number)
        if "amount" in record.degraded_fields:
            self.degraded_amounts.append(row_number)

    @property
    def has_degraded_rows(self) -> bool:
        return bool(self.degraded_dates or self.degraded_amounts)
