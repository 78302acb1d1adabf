"""Visits services."""

from app.services.visits.reports import ReportMetadata, ReportsProvider, VisitsSummaryReport
from app.services.visits.summary import VisitsSummary

__all__ = [
    "ReportMetadata",
    "ReportsProvider",
    "VisitsSummary",
    "VisitsSummaryReport",
]
