"""Periods and date expressions."""

import re
from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from dateutil.relativedelta import relativedelta

from app.errors import InvalidRequest
from app.models.common.base import BaseEntity

_RELATIVE = re.compile(r"(last|previous)(\d+)")


class Period(StrEnum):
    """Time granularity metrics are archived for."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    RANGE = "range"


@dataclass(frozen=True)
class SubPeriod(BaseEntity):
    """One archived period: inclusive date bounds."""

    period: Period
    start: date
    end: date

    @property
    def label(self) -> str:
        if self.period == Period.DAY:
            return self.start.isoformat()
        if self.period == Period.MONTH:
            return self.start.strftime("%Y-%m")
        if self.period == Period.YEAR:
            return str(self.start.year)
        return f"{self.start.isoformat()},{self.end.isoformat()}"


@dataclass(frozen=True)
class PeriodSelection(BaseEntity):
    """Sub-periods a query covers; multi is True for per-period series."""

    sub_periods: tuple[SubPeriod, ...]
    multi: bool


def parse_period(value: str | Period) -> Period:
    """Validate a period name."""
    try:
        return Period(value)
    except ValueError:
        raise InvalidRequest(f"Unknown period: {value!r}") from None


def parse_date(expr: str, today: date) -> date:
    """Parse YYYY-MM-DD, 'today' or 'yesterday'."""
    expr = expr.strip()
    if expr == "today":
        return today
    if expr == "yesterday":
        return today - relativedelta(days=1)
    try:
        return date.fromisoformat(expr)
    except ValueError:
        raise InvalidRequest(f"Invalid date: {expr!r}") from None


_STEPS = {
    Period.DAY: relativedelta(days=1),
    Period.WEEK: relativedelta(weeks=1),
    Period.MONTH: relativedelta(months=1),
    Period.YEAR: relativedelta(years=1),
}


def containing(period: Period, day: date) -> SubPeriod:
    """Sub-period of the given granularity that contains the day."""
    if period == Period.DAY:
        start = day
    elif period == Period.WEEK:
        start = day - relativedelta(days=day.weekday())
    elif period == Period.MONTH:
        start = day + relativedelta(day=1)
    elif period == Period.YEAR:
        start = day + relativedelta(month=1, day=1)
    else:
        raise InvalidRequest("Period 'range' needs two dates, e.g. 2024-01-01,2024-01-31")
    return SubPeriod(period, start, start + _STEPS[period] - relativedelta(days=1))


def resolve_periods(period: str | Period, expr: str, today: date | None = None) -> PeriodSelection:
    """Resolve a (period, date expression) pair into archived sub-periods."""
    period = parse_period(period)
    today = today or date.today()
    expr = str(expr).strip()
    relative = _RELATIVE.fullmatch(expr)

    if relative:
        count = int(relative.group(2))
        if count < 1:
            raise InvalidRequest(f"Invalid date: {expr!r}")
        previous = relative.group(1) == "previous"

        if period == Period.RANGE:
            end = today - relativedelta(days=1) if previous else today
            start = end - relativedelta(days=count - 1)
            return PeriodSelection((SubPeriod(period, start, end),), multi=False)

        current = containing(period, today)
        if previous:
            current = containing(period, current.start - _STEPS[period])
        subs = [current]
        for _ in range(count - 1):
            subs.append(containing(period, subs[-1].start - _STEPS[period]))
        return PeriodSelection(tuple(reversed(subs)), multi=True)

    if "," in expr:
        parts = expr.split(",")
        if len(parts) != 2:
            raise InvalidRequest(f"Invalid date range: {expr!r}")
        start, end = parse_date(parts[0], today), parse_date(parts[1], today)
        if start > end:
            raise InvalidRequest(f"Date range starts after it ends: {expr!r}")

        if period == Period.RANGE:
            return PeriodSelection((SubPeriod(period, start, end),), multi=False)

        subs = [containing(period, start)]
        while subs[-1].end < end:
            subs.append(containing(period, subs[-1].start + _STEPS[period]))
        return PeriodSelection(tuple(subs), multi=True)

    return PeriodSelection((containing(period, parse_date(expr, today)),), multi=False)
