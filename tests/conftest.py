"""Shared fixtures: in-memory collaborators for the visits summary service."""

import duckdb
import pytest

from app.models.visits.access import AccessLevel
from app.models.visits.period import resolve_periods
from app.models.visits.result import ResultTable
from app.repositories.common.cache import TransientCache
from app.repositories.db import init_tables
from app.services.common.access import AccessService
from app.services.common.formatter import MetricsFormatter
from app.services.common.policy import UniqueVisitorPolicy
from app.services.visits.reports import ReportsProvider
from app.services.visits.summary import VisitsSummary


class FakeArchive:
    """Archive store holding rows per (site, period, date); records every fetch."""

    def __init__(self):
        self.rows: dict[tuple, dict[str, dict]] = {}
        self.calls: list[dict] = []

    def put(self, site_id, period, date, row, label=None):
        key = (site_id, str(period), date)
        self.rows.setdefault(key, {})[label or date] = dict(row)

    def fetch_numeric(self, site_id, period, date, segment, columns):
        columns = [str(c) for c in columns]
        self.calls.append(
            {"site_id": site_id, "period": str(period), "date": date, "segment": segment, "columns": columns}
        )
        stored = self.rows.get((site_id, str(period), date), {date: {}})
        rows = {label: {c: row[c] for c in columns if c in row} for label, row in stored.items()}
        return ResultTable(rows=rows, multi=resolve_periods(period, date).multi)


class FakeAccessRepo:
    """Access rows as a dict."""

    def __init__(self, grants: dict[tuple[str, int], AccessLevel] | None = None):
        self.grants = grants or {}

    def get_access(self, login, site_id):
        return self.grants.get((login, site_id))


@pytest.fixture
def archive():
    return FakeArchive()


@pytest.fixture
def cache():
    return TransientCache()


@pytest.fixture
def access():
    repo = FakeAccessRepo({("alice", 1): AccessLevel.VIEW, ("alice", 3): AccessLevel.ADMIN})
    return AccessService(repo, "alice")


@pytest.fixture
def make_api(archive, cache, access):
    def make(unique_periods=("day", "week", "month"), access_service=None):
        return VisitsSummary(
            access=access_service or access,
            archive_repo=archive,
            reports=ReportsProvider(),
            unique_policy=UniqueVisitorPolicy(unique_periods),
            formatter=MetricsFormatter(),
            cache=cache,
        )

    return make


@pytest.fixture
def api(make_api):
    return make_api()


@pytest.fixture
def conn():
    conn = duckdb.connect(":memory:")
    init_tables(conn)
    yield conn
    conn.close()
