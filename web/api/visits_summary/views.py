"""Visits summary API views - thin layer over the service.

Each view takes the request's VisitsSummary (see open_scope) so memoized
values live exactly as long as the request. Domain failures are returned as
ErrorResponse values, never raised.
"""

from collections.abc import Callable

from app.container import container
from app.errors import MetricsError
from app.models.visits.metrics import Metric
from app.models.visits.result import MetricValue, Scalar
from app.services.visits.summary import VisitsSummary
from settings import ANONYMOUS_LOGIN
from web.api.errors import ValidationError, to_error_response, validate_site_id
from web.api.schemas import ErrorResponse

from .schemas import MetricsTableResponse, MetricValueResponse, ProfilableResponse

_ACCESSORS: dict[Metric, Callable[[VisitsSummary], Callable[..., MetricValue]]] = {
    Metric.VISITS: lambda api: api.visits,
    Metric.UNIQUE_VISITORS: lambda api: api.unique_visitors,
    Metric.USERS: lambda api: api.users,
    Metric.ACTIONS: lambda api: api.actions,
    Metric.MAX_ACTIONS: lambda api: api.max_actions,
    Metric.BOUNCE_COUNT: lambda api: api.bounce_count,
    Metric.VISITS_CONVERTED: lambda api: api.visits_converted,
    Metric.SUM_VISIT_LENGTH: lambda api: api.sum_visit_length,
}


def open_scope(login: str = ANONYMOUS_LOGIN, superuser: bool = False) -> VisitsSummary:
    """Service for one inbound request, with its own transient cache."""
    return container.visits_summary(login, superuser=superuser)


def _value_response(site_id: int, period: str, date: str, metric: str, value: MetricValue) -> MetricValueResponse:
    if isinstance(value, Scalar):
        return MetricValueResponse(site_id=site_id, period=period, date=date, metric=metric, value=value.value)
    return MetricValueResponse(site_id=site_id, period=period, date=date, metric=metric, series=value.values)


def get(
    api: VisitsSummary,
    site_id: int,
    period: str,
    date: str,
    segment: str | None = None,
    columns: str | list[str] | None = None,
) -> MetricsTableResponse | ErrorResponse:
    """Get core visit metrics."""
    validate_site_id(site_id)
    try:
        table = api.get(site_id, period, date, segment, columns)
    except MetricsError as e:
        return to_error_response(e)

    return MetricsTableResponse(
        site_id=site_id,
        period=period,
        date=date,
        multi=table.multi,
        columns=table.columns(),
        rows=table.rows,
    )


def get_metric(
    api: VisitsSummary,
    metric: str,
    site_id: int,
    period: str,
    date: str,
    segment: str | None = None,
) -> MetricValueResponse | ErrorResponse:
    """Get a single metric by its column name."""
    validate_site_id(site_id)
    try:
        accessor = _ACCESSORS[Metric(metric)](api)
    except (ValueError, KeyError):
        raise ValidationError(f"Unknown metric: {metric!r}") from None

    try:
        value = accessor(site_id, period, date, segment)
    except MetricsError as e:
        return to_error_response(e)

    return _value_response(site_id, period, date, metric, value)


def get_sum_visit_length_pretty(
    api: VisitsSummary,
    site_id: int,
    period: str,
    date: str,
    segment: str | None = None,
) -> MetricValueResponse | ErrorResponse:
    """Get total visit length as readable text."""
    validate_site_id(site_id)
    try:
        value = api.sum_visit_length_pretty(site_id, period, date, segment)
    except MetricsError as e:
        return to_error_response(e)

    return _value_response(site_id, period, date, str(Metric.SUM_VISIT_LENGTH), value)


def is_profilable(
    api: VisitsSummary,
    site_id: int,
    period: str,
    date: str,
    segment: str | None = None,
) -> ProfilableResponse | ErrorResponse:
    """Get whether the site's traffic is profilable."""
    validate_site_id(site_id)
    try:
        profilable = api.is_profilable(site_id, period, date, segment)
    except MetricsError as e:
        return to_error_response(e)

    return ProfilableResponse(site_id=site_id, period=period, date=date, profilable=profilable)
