"""Report metadata - metric sets and column reconciliation per report."""

from collections.abc import Iterable
from typing import Protocol

from loguru import logger

from app.errors import InvalidRequest
from app.models.visits.metrics import BASE_COLUMNS, UNIQUE_COLUMNS, ReportId


class ReportMetadata(Protocol):
    """What a report defines and which columns it must fetch."""

    report_id: ReportId

    @property
    def all_metrics(self) -> list[str]: ...

    def required_columns(self, base: Iterable[str], requested: Iterable[str] | None) -> list[str]: ...


class VisitsSummaryReport:
    """Metadata of the visits summary report."""

    report_id = ReportId.VISITS_SUMMARY_GET

    @property
    def all_metrics(self) -> list[str]:
        return [str(m) for m in (*UNIQUE_COLUMNS, *BASE_COLUMNS)]

    def required_columns(self, base: Iterable[str], requested: Iterable[str] | None) -> list[str]:
        """Columns to fetch: base columns first, then any extra requested ones.

        Requested columns are only pruned from the output, never from the
        fetch, so columns needed to derive a value are always archived.
        """
        columns = dict.fromkeys(str(c) for c in base)
        columns.update(dict.fromkeys(str(c) for c in requested or ()))
        return list(columns)


class ReportsProvider:
    """Registry of report metadata, keyed by report id."""

    def __init__(self, reports: Iterable[ReportMetadata] | None = None):
        self._reports: dict[ReportId, ReportMetadata] = {}
        for report in reports if reports is not None else (VisitsSummaryReport(),):
            self.register(report)

    def register(self, report: ReportMetadata) -> None:
        self._reports[report.report_id] = report
        logger.debug("Report registered: {}", report.report_id)

    def factory(self, report_id: ReportId) -> ReportMetadata:
        """Metadata for the report."""
        try:
            return self._reports[report_id]
        except KeyError:
            raise InvalidRequest(f"Unknown report: {report_id}") from None
