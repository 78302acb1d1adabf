"""Visits summary API response schemas."""

from pydantic import BaseModel


class MetricsTableResponse(BaseModel):
    """Metrics table, one row per sub-period."""

    site_id: int
    period: str
    date: str
    multi: bool
    columns: list[str]
    rows: dict[str, dict[str, int | float]]


class MetricValueResponse(BaseModel):
    """Single metric: value for one period, series for several."""

    site_id: int
    period: str
    date: str
    metric: str
    value: int | float | str | None = None
    series: dict[str, int | float | str] | None = None


class ProfilableResponse(BaseModel):
    """Profilable traffic flag."""

    site_id: int
    period: str
    date: str
    profilable: bool
