"""Models package - DDL and entities for all domains."""

from app.models.common import BaseEntity, CacheEntry, CacheKey
from app.models.visits import (
    ARCHIVE_NUMERIC_DDL,
    SITE_ACCESS_DDL,
    Metric,
    MetricValue,
    Period,
    ReportId,
    ResultTable,
    Scalar,
    Segment,
    Series,
)

ALL_DDL = [
    ARCHIVE_NUMERIC_DDL,
    SITE_ACCESS_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    "CacheEntry",
    "CacheKey",
    # Visits
    "ARCHIVE_NUMERIC_DDL",
    "SITE_ACCESS_DDL",
    "Metric",
    "MetricValue",
    "Period",
    "ReportId",
    "ResultTable",
    "Scalar",
    "Segment",
    "Series",
    # All DDL
    "ALL_DDL",
]
