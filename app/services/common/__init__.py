"""Common services - access checks, formatting and feature policies."""

from app.services.common.access import AccessService
from app.services.common.formatter import MetricsFormatter
from app.services.common.policy import UniqueVisitorPolicy

__all__ = [
    "AccessService",
    "MetricsFormatter",
    "UniqueVisitorPolicy",
]
