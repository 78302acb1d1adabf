"""Unique visitor policy - which periods archive unique visitor counts."""

from collections.abc import Iterable

from loguru import logger

from app.models.visits.period import Period
from settings import UNIQUE_VISITORS_PERIODS


class UniqueVisitorPolicy:
    """Feature gate for unique visitor and user metrics."""

    def __init__(self, enabled_periods: Iterable[Period | str]):
        self.enabled_periods = frozenset(Period(p) for p in enabled_periods)

    @classmethod
    def from_settings(cls, value: str = UNIQUE_VISITORS_PERIODS) -> "UniqueVisitorPolicy":
        """Build from a comma separated list of period names."""
        periods = []
        for name in (p.strip() for p in value.split(",")):
            if not name:
                continue
            if name not in {p.value for p in Period}:
                logger.warning("Ignoring unknown period in unique visitors setting: {}", name)
                continue
            periods.append(Period(name))
        logger.debug("Unique visitors enabled for: {}", ", ".join(sorted(periods)) or "none")
        return cls(periods)

    def is_enabled(self, period: Period | str) -> bool:
        return period in self.enabled_periods
