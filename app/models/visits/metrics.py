"""Visit metric identifiers and report ids."""

from enum import StrEnum


class Metric(StrEnum):
    """Numeric metrics archived for the visits summary."""

    UNIQUE_VISITORS = "nb_uniq_visitors"
    USERS = "nb_users"
    VISITS = "nb_visits"
    ACTIONS = "nb_actions"
    VISITS_CONVERTED = "nb_visits_converted"
    BOUNCE_COUNT = "bounce_count"
    SUM_VISIT_LENGTH = "sum_visit_length"
    MAX_ACTIONS = "max_actions"
    PROFILABLE = "nb_profilable"


class ReportId(StrEnum):
    """Reports with registered metadata."""

    VISITS_SUMMARY_GET = "VisitsSummary.get"


# Always fetched, in API output order
BASE_COLUMNS: tuple[Metric, ...] = (
    Metric.VISITS,
    Metric.ACTIONS,
    Metric.VISITS_CONVERTED,
    Metric.BOUNCE_COUNT,
    Metric.SUM_VISIT_LENGTH,
    Metric.MAX_ACTIONS,
    Metric.PROFILABLE,
)

# Prepended to BASE_COLUMNS when unique visitors are enabled for the period
UNIQUE_COLUMNS: tuple[Metric, ...] = (
    Metric.UNIQUE_VISITORS,
    Metric.USERS,
)
