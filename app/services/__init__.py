"""Services package - service class exports."""

from app.services.common import AccessService, MetricsFormatter, UniqueVisitorPolicy
from app.services.visits import ReportsProvider, VisitsSummary, VisitsSummaryReport

__all__ = [
    "AccessService",
    "MetricsFormatter",
    "ReportsProvider",
    "UniqueVisitorPolicy",
    "VisitsSummary",
    "VisitsSummaryReport",
]
