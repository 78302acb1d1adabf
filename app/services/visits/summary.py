"""Visits summary service - core visit metrics for a site."""

from collections.abc import Iterable

from loguru import logger

from app.errors import UnsupportedMetric
from app.models.common.cache import CacheKey
from app.models.visits.metrics import BASE_COLUMNS, UNIQUE_COLUMNS, Metric, ReportId
from app.models.visits.period import Period, parse_period
from app.models.visits.result import MetricValue, ResultTable, Scalar, unwrap
from app.models.visits.segment import Segment
from app.repositories.common.cache import TransientCache
from app.repositories.visits.archive import ArchiveRepository
from app.services.common.access import AccessService
from app.services.common.formatter import MetricsFormatter
from app.services.common.policy import UniqueVisitorPolicy
from app.services.visits.reports import ReportsProvider
from settings import PROFILABLE_RATIO_THRESHOLD

SegmentArg = Segment | str | None


def parse_columns(columns: str | Iterable[str] | None) -> list[str]:
    """Normalize a column list or comma separated string, dropping blanks and repeats."""
    if not columns:
        return []
    if isinstance(columns, str):
        columns = columns.split(",")
    return list(dict.fromkeys(c for c in (str(c).strip() for c in columns) if c))


class VisitsSummary:
    """Visits, actions, bounces and visit length for a site.

    One instance serves one request scope: the transient cache it is given
    memoizes derived values for that scope only.
    """

    CACHE_PREFIX = "VisitsSummary"

    def __init__(
        self,
        access: AccessService,
        archive_repo: ArchiveRepository,
        reports: ReportsProvider,
        unique_policy: UniqueVisitorPolicy,
        formatter: MetricsFormatter,
        cache: TransientCache,
    ):
        self._access = access
        self._archive = archive_repo
        self._reports = reports
        self._unique = unique_policy
        self._formatter = formatter
        self._cache = cache
        logger.debug("VisitsSummary initialized for {}", access.login)

    def core_columns(self, period: Period | str) -> list[str]:
        """Columns always fetched for the period, unique visitor columns first."""
        columns = [str(m) for m in BASE_COLUMNS]
        if self._unique.is_enabled(parse_period(period)):
            columns = [str(m) for m in UNIQUE_COLUMNS] + columns
        return columns

    def get(
        self,
        site_id: int,
        period: Period | str,
        date: str,
        segment: SegmentArg = None,
        columns: str | Iterable[str] | None = None,
    ) -> ResultTable:
        """All core metrics, or exactly the requested columns in requested order."""
        self._access.check_view_access(site_id)
        requested = parse_columns(columns)

        report = self._reports.factory(ReportId.VISITS_SUMMARY_GET)
        to_fetch = report.required_columns(self.core_columns(period), requested)
        table = self._archive.fetch_numeric(site_id, period, date, self._segment(segment, site_id), to_fetch)

        if requested:
            table = table.select(requested)
        return table

    def is_profilable(self, site_id: int, period: Period | str, date: str, segment: SegmentArg = None) -> bool:
        """Whether enough visits are profilable to show visitor profiles.

        Memoized per (site, period, date, segment) for the cache's scope.
        """
        self._access.check_view_access(site_id)
        segment = self._segment(segment, site_id)
        key = CacheKey(
            operation=f"{self.CACHE_PREFIX}.isProfilable",
            site_id=site_id,
            period=str(parse_period(period)),
            date=str(date).strip(),
            segment_hash=segment.hash(),
        )

        def compute() -> bool:
            table = self.get(site_id, period, date, segment, [Metric.VISITS, Metric.PROFILABLE])
            # Periods without a profilable count say nothing either way
            measured = [row for row in table.rows.values() if row.get(Metric.PROFILABLE) is not None]
            visits = sum(row.get(Metric.VISITS) or 0 for row in measured)

            # No evidence against profilable traffic
            if not visits:
                return True

            ratio = float(sum(row[Metric.PROFILABLE] for row in measured)) / float(visits)
            logger.debug("Profilable ratio for site {}: {:.4f}", site_id, ratio)
            return ratio > PROFILABLE_RATIO_THRESHOLD

        return bool(self._cache.get_or_compute(key, compute))

    def visits(self, site_id: int, period: Period | str, date: str, segment: SegmentArg = None) -> MetricValue:
        return self._get_numeric(site_id, period, date, segment, Metric.VISITS)

    def unique_visitors(self, site_id: int, period: Period | str, date: str, segment: SegmentArg = None) -> MetricValue:
        return self._get_numeric(site_id, period, date, segment, Metric.UNIQUE_VISITORS, needs_unique=True)

    def users(self, site_id: int, period: Period | str, date: str, segment: SegmentArg = None) -> MetricValue:
        return self._get_numeric(site_id, period, date, segment, Metric.USERS, needs_unique=True)

    def actions(self, site_id: int, period: Period | str, date: str, segment: SegmentArg = None) -> MetricValue:
        return self._get_numeric(site_id, period, date, segment, Metric.ACTIONS)

    def max_actions(self, site_id: int, period: Period | str, date: str, segment: SegmentArg = None) -> MetricValue:
        return self._get_numeric(site_id, period, date, segment, Metric.MAX_ACTIONS)

    def bounce_count(self, site_id: int, period: Period | str, date: str, segment: SegmentArg = None) -> MetricValue:
        return self._get_numeric(site_id, period, date, segment, Metric.BOUNCE_COUNT)

    def visits_converted(self, site_id: int, period: Period | str, date: str, segment: SegmentArg = None) -> MetricValue:
        return self._get_numeric(site_id, period, date, segment, Metric.VISITS_CONVERTED)

    def sum_visit_length(self, site_id: int, period: Period | str, date: str, segment: SegmentArg = None) -> MetricValue:
        return self._get_numeric(site_id, period, date, segment, Metric.SUM_VISIT_LENGTH)

    def sum_visit_length_pretty(
        self, site_id: int, period: Period | str, date: str, segment: SegmentArg = None
    ) -> MetricValue:
        """Total visit length as readable text, e.g. "2 hours 5 min"."""
        value = self.sum_visit_length(site_id, period, date, segment)
        if isinstance(value, Scalar):
            return Scalar(self._formatter.pretty_duration(value.value))
        return value.map(self._formatter.pretty_duration)

    def _get_numeric(
        self,
        site_id: int,
        period: Period | str,
        date: str,
        segment: SegmentArg,
        metric: Metric,
        needs_unique: bool = False,
    ) -> MetricValue:
        """Fetch one metric, unwrapped to a scalar or per-period series."""
        self._access.check_view_access(site_id)
        if needs_unique:
            self._check_unique_enabled(period, metric)

        table = self._archive.fetch_numeric(site_id, period, date, self._segment(segment, site_id), [metric])
        return unwrap(table, metric)

    def _check_unique_enabled(self, period: Period | str, metric: Metric) -> None:
        period = parse_period(period)
        if not self._unique.is_enabled(period):
            raise UnsupportedMetric(str(metric), str(period))

    @staticmethod
    def _segment(segment: SegmentArg, site_id: int) -> Segment:
        if isinstance(segment, Segment):
            return segment
        return Segment.build(segment, [site_id])
