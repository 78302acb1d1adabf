"""Archive repository - pre-aggregated numeric metrics."""

from collections.abc import Iterable

from loguru import logger

from app.errors import InvalidRequest
from app.models.visits.period import Period, resolve_periods
from app.models.visits.result import Number, ResultTable
from app.models.visits.segment import Segment
from app.repositories.base import BaseRepository


def _number(value: float) -> Number:
    return int(value) if float(value).is_integer() else value


class ArchiveRepository(BaseRepository):
    """Repository for numeric archive reads and writes."""

    def fetch_numeric(
        self,
        site_id: int,
        period: str | Period,
        date: str,
        segment: Segment | None,
        columns: Iterable[str],
    ) -> ResultTable:
        """Archived values for the columns, one row per sub-period.

        Columns with no archived value are left out of the row.
        """
        columns = [str(c) for c in columns]
        selection = resolve_periods(period, date)
        subs = selection.sub_periods
        rows = {sp.label: {} for sp in subs}

        if columns:
            placeholders = ", ".join("?" for _ in columns)
            found = self.fetchall(
                f"""
                SELECT date1, date2, name, value FROM archive_numeric
                WHERE site_id = ? AND period = ? AND segment_hash = ?
                  AND date1 >= ? AND date2 <= ?
                  AND name IN ({placeholders})
                """,
                [site_id, subs[0].period.value, segment.hash() if segment else "", subs[0].start, subs[-1].end, *columns],
            )
            by_bounds: dict[tuple, dict[str, float]] = {}
            for date1, date2, name, value in found:
                by_bounds.setdefault((date1, date2), {})[name] = value

            for sp in subs:
                archived = by_bounds.get((sp.start, sp.end), {})
                rows[sp.label] = {c: _number(archived[c]) for c in columns if c in archived}

        logger.debug(
            "fetch_numeric(site={}, period={}, date={}): {} columns, {} rows",
            site_id,
            period,
            date,
            len(columns),
            len(rows),
        )
        return ResultTable(rows=rows, multi=selection.multi)

    def store_numeric(
        self,
        site_id: int,
        period: str | Period,
        date: str,
        values: dict[str, Number],
        segment: Segment | None = None,
    ) -> None:
        """Write archived values for one sub-period (replaces existing ones)."""
        self._require_writable()
        selection = resolve_periods(period, date)
        if selection.multi:
            raise InvalidRequest(f"Cannot store values for multiple periods at once: {date!r}")

        sp = selection.sub_periods[0]
        segment_hash = segment.hash() if segment else ""
        for name, value in values.items():
            self.execute(
                """
                INSERT OR REPLACE INTO archive_numeric (site_id, period, date1, date2, segment_hash, name, value)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                [site_id, sp.period.value, sp.start, sp.end, segment_hash, str(name), float(value)],
            )
        logger.debug("store_numeric(site={}, {}): {} values", site_id, sp.label, len(values))
