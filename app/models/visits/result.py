"""Result shapes returned by the metrics API."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from app.models.common.base import BaseEntity

Number = int | float
MetricRow = dict[str, Number]


@dataclass
class ResultTable:
    """Numeric metrics keyed by sub-period label.

    Single-period queries hold exactly one row; multi-period queries hold one
    row per sub-period, in chronological order.
    """

    rows: dict[str, MetricRow] = field(default_factory=dict)
    multi: bool = False

    def first_row(self) -> MetricRow:
        """First row, or an empty row when nothing was archived."""
        return next(iter(self.rows.values()), {})

    def columns(self) -> list[str]:
        """Column names in first-seen order across rows."""
        seen: dict[str, None] = {}
        for row in self.rows.values():
            seen.update(dict.fromkeys(row))
        return list(seen)

    def select(self, columns: Iterable[str]) -> "ResultTable":
        """Keep only the given columns, in the given order."""
        columns = list(columns)
        rows = {label: {c: row[c] for c in columns if c in row} for label, row in self.rows.items()}
        return ResultTable(rows=rows, multi=self.multi)

    def map_column(self, column: str, fn: Callable[[Number], Any]) -> "ResultTable":
        """Apply fn to one column in every row, leaving the structure intact."""
        rows = {
            label: {c: fn(v) if c == column else v for c, v in row.items()} for label, row in self.rows.items()
        }
        return ResultTable(rows=rows, multi=self.multi)

    def to_dict(self) -> dict[str, MetricRow] | MetricRow:
        """Plain dict: the single row, or rows keyed by label."""
        if self.multi:
            return {label: dict(row) for label, row in self.rows.items()}
        return dict(self.first_row())


@dataclass(frozen=True)
class Scalar(BaseEntity):
    """Single-period metric value."""

    value: Any


@dataclass(frozen=True)
class Series(BaseEntity):
    """Multi-period metric values keyed by sub-period label."""

    values: dict[str, Any]

    def map(self, fn: Callable[[Any], Any]) -> "Series":
        return Series({label: fn(v) for label, v in self.values.items()})


MetricValue = Scalar | Series


def unwrap(table: ResultTable, metric: str, default: Number = 0) -> MetricValue:
    """Reduce a table to one metric's natural shape."""
    if table.multi:
        return Series({label: row.get(metric, default) for label, row in table.rows.items()})
    return Scalar(table.first_row().get(metric, default))
