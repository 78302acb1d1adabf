"""Domain errors - typed failures raised by the metrics API."""

from enum import StrEnum

from settings import UNIQUE_VISITORS_FAQ_URL


class ErrorKind(StrEnum):
    """Discriminant for branching on failures without parsing messages."""

    ACCESS_DENIED = "access_denied"
    UNSUPPORTED_METRIC = "unsupported_metric"
    INVALID_REQUEST = "invalid_request"


class MetricsError(Exception):
    """Base class for all metrics API failures."""

    kind: ErrorKind

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class AccessDenied(MetricsError):
    """Caller lacks view access on the site."""

    kind = ErrorKind.ACCESS_DENIED

    def __init__(self, site_id: int, login: str):
        self.site_id = site_id
        self.login = login
        super().__init__(f"User '{login}' does not have view access for site {site_id}")


class UnsupportedMetric(MetricsError):
    """Metric is disabled by configuration for the requested period."""

    kind = ErrorKind.UNSUPPORTED_METRIC

    def __init__(self, metric: str, period: str, faq_url: str = UNIQUE_VISITORS_FAQ_URL):
        self.metric = metric
        self.period = period
        self.faq_url = faq_url
        super().__init__(
            f"The metric {metric} is not enabled for the requested period. Please see this FAQ: {faq_url}"
        )


class InvalidRequest(MetricsError):
    """Malformed period or date expression."""

    kind = ErrorKind.INVALID_REQUEST
