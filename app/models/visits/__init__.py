"""Visits models - metrics, periods, segments and result shapes."""

from app.models.visits.access import SITE_ACCESS_DDL, AccessLevel
from app.models.visits.archive import ARCHIVE_NUMERIC_DDL
from app.models.visits.metrics import BASE_COLUMNS, UNIQUE_COLUMNS, Metric, ReportId
from app.models.visits.period import Period, PeriodSelection, SubPeriod, parse_period, resolve_periods
from app.models.visits.result import MetricRow, MetricValue, ResultTable, Scalar, Series, unwrap
from app.models.visits.segment import Segment

__all__ = [
    # Tables
    "ARCHIVE_NUMERIC_DDL",
    "SITE_ACCESS_DDL",
    "AccessLevel",
    # Metrics
    "Metric",
    "ReportId",
    "BASE_COLUMNS",
    "UNIQUE_COLUMNS",
    # Periods
    "Period",
    "PeriodSelection",
    "SubPeriod",
    "parse_period",
    "resolve_periods",
    # Results
    "MetricRow",
    "MetricValue",
    "ResultTable",
    "Scalar",
    "Series",
    "unwrap",
    # Segments
    "Segment",
]
