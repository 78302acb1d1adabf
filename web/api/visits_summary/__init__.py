"""Visits summary API."""

from web.api.visits_summary.views import get, get_metric, get_sum_visit_length_pretty, is_profilable, open_scope

__all__ = [
    "get",
    "get_metric",
    "get_sum_visit_length_pretty",
    "is_profilable",
    "open_scope",
]
