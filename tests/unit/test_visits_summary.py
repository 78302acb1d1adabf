"""Tests for the visits summary service."""

import pytest

from app.errors import AccessDenied, ErrorKind, InvalidRequest, UnsupportedMetric
from app.models.visits.result import Scalar, Series
from app.models.visits.segment import Segment

BASE = [
    "nb_visits",
    "nb_actions",
    "nb_visits_converted",
    "bounce_count",
    "sum_visit_length",
    "max_actions",
    "nb_profilable",
]
FULL_ROW = {
    "nb_uniq_visitors": 80,
    "nb_users": 5,
    "nb_visits": 100,
    "nb_actions": 350,
    "nb_visits_converted": 7,
    "bounce_count": 40,
    "sum_visit_length": 12345,
    "max_actions": 42,
    "nb_profilable": 60,
}


class TestCoreColumns:
    def test_unique_enabled_prepends_unique_columns(self, api):
        assert api.core_columns("day") == ["nb_uniq_visitors", "nb_users", *BASE]

    def test_unique_disabled(self, api):
        assert api.core_columns("year") == BASE
        assert api.core_columns("range") == BASE

    def test_invalid_period(self, api):
        with pytest.raises(InvalidRequest):
            api.core_columns("fortnight")


class TestGet:
    def test_all_columns_when_none_requested(self, api, archive):
        archive.put(1, "day", "2024-01-01", FULL_ROW)

        table = api.get(1, "day", "2024-01-01")

        assert list(table.first_row()) == ["nb_uniq_visitors", "nb_users", *BASE]
        assert archive.calls[0]["columns"] == ["nb_uniq_visitors", "nb_users", *BASE]

    def test_all_columns_without_unique(self, api, archive):
        archive.put(1, "year", "2024-01-01", FULL_ROW)
        table = api.get(1, "year", "2024-01-01")
        assert list(table.first_row()) == BASE

    def test_requested_columns_pruned_in_requested_order(self, api, archive):
        archive.put(1, "day", "2024-01-01", FULL_ROW)

        table = api.get(1, "day", "2024-01-01", columns=["bounce_count", "nb_visits"])

        assert table.first_row() == {"bounce_count": 40, "nb_visits": 100}
        # Fetch still includes every core column
        assert archive.calls[0]["columns"][:9] == ["nb_uniq_visitors", "nb_users", *BASE]

    def test_comma_separated_columns(self, api, archive):
        archive.put(1, "day", "2024-01-01", FULL_ROW)
        table = api.get(1, "day", "2024-01-01", columns="max_actions, nb_actions,,max_actions")
        assert table.first_row() == {"max_actions": 42, "nb_actions": 350}

    def test_extra_requested_column_is_fetched(self, api, archive):
        archive.put(1, "day", "2024-01-01", {**FULL_ROW, "nb_custom": 3})

        table = api.get(1, "day", "2024-01-01", columns=["nb_custom"])

        assert archive.calls[0]["columns"][-1] == "nb_custom"
        assert table.first_row() == {"nb_custom": 3}

    def test_empty_columns_means_all(self, api, archive):
        archive.put(1, "day", "2024-01-01", FULL_ROW)
        assert len(api.get(1, "day", "2024-01-01", columns=[]).first_row()) == 9

    def test_missing_values_not_invented(self, api, archive):
        archive.put(1, "day", "2024-01-01", {"nb_visits": 3})
        table = api.get(1, "day", "2024-01-01", columns=["nb_visits", "nb_users"])
        assert table.first_row() == {"nb_visits": 3}

    def test_segment_string_is_built(self, api, archive):
        api.get(1, "day", "2024-01-01", segment="browserCode%3D%3Dff")
        segment = archive.calls[0]["segment"]
        assert segment == Segment("browserCode==ff", (1,))

    def test_access_denied_before_fetch(self, api, archive):
        with pytest.raises(AccessDenied) as exc:
            api.get(2, "day", "2024-01-01")
        assert exc.value.kind == ErrorKind.ACCESS_DENIED
        assert archive.calls == []


class TestSingleMetrics:
    @pytest.mark.parametrize(
        "method, metric",
        [
            ("visits", "nb_visits"),
            ("actions", "nb_actions"),
            ("max_actions", "max_actions"),
            ("bounce_count", "bounce_count"),
            ("visits_converted", "nb_visits_converted"),
            ("sum_visit_length", "sum_visit_length"),
            ("unique_visitors", "nb_uniq_visitors"),
            ("users", "nb_users"),
        ],
    )
    def test_scalar(self, api, archive, method, metric):
        archive.put(1, "day", "2024-01-01", FULL_ROW)

        result = getattr(api, method)(1, "day", "2024-01-01")

        assert result == Scalar(FULL_ROW[metric])
        assert archive.calls[0]["columns"] == [metric]

    def test_missing_value_is_zero(self, api):
        assert api.visits(1, "day", "2024-01-01") == Scalar(0)

    def test_series_for_multiple_periods(self, api, archive):
        date = "2024-01-01,2024-01-02"
        archive.put(1, "day", date, {"nb_visits": 4}, label="2024-01-01")
        archive.put(1, "day", date, {"nb_visits": 6}, label="2024-01-02")

        result = api.visits(1, "day", date)

        assert result == Series({"2024-01-01": 4, "2024-01-02": 6})

    @pytest.mark.parametrize("method", ["unique_visitors", "users"])
    @pytest.mark.parametrize("period", ["year", "range"])
    def test_unique_disabled_fails(self, api, archive, method, period):
        date = "2024-01-01,2024-01-31" if period == "range" else "2024-01-01"
        with pytest.raises(UnsupportedMetric) as exc:
            getattr(api, method)(1, period, date)
        assert exc.value.kind == ErrorKind.UNSUPPORTED_METRIC
        assert "faq_113" in exc.value.message
        assert archive.calls == []

    def test_access_checked_before_unique_gate(self, api):
        with pytest.raises(AccessDenied):
            api.users(2, "year", "2024-01-01")

    @pytest.mark.parametrize("method", ["visits", "actions", "users", "sum_visit_length_pretty", "is_profilable"])
    def test_access_denied_before_fetch(self, api, archive, method):
        with pytest.raises(AccessDenied):
            getattr(api, method)(2, "day", "2024-01-01")
        assert archive.calls == []


class TestSumVisitLengthPretty:
    def test_scalar(self, api, archive):
        archive.put(1, "day", "2024-01-01", {"sum_visit_length": 3723})
        assert api.sum_visit_length_pretty(1, "day", "2024-01-01") == Scalar("1 hours 2 min")

    def test_series_keeps_structure(self, api, archive):
        date = "2024-01-01,2024-01-02"
        archive.put(1, "day", date, {"sum_visit_length": 45}, label="2024-01-01")
        archive.put(1, "day", date, {"sum_visit_length": 200}, label="2024-01-02")

        result = api.sum_visit_length_pretty(1, "day", date)

        assert result == Series({"2024-01-01": "45s", "2024-01-02": "3 min 20s"})


class TestIsProfilable:
    @pytest.mark.parametrize(
        "row, expected",
        [
            ({"nb_visits": 100, "nb_profilable": 1}, False),
            ({"nb_visits": 100, "nb_profilable": 2}, True),
            ({"nb_visits": 100, "nb_profilable": 0}, False),
            ({"nb_visits": 0, "nb_profilable": 0}, True),
            ({"nb_visits": 0, "nb_profilable": 50}, True),
            ({"nb_visits": 100}, True),
            ({"nb_visits": 0}, True),
            ({}, True),
        ],
    )
    def test_ratio(self, api, archive, row, expected):
        archive.put(1, "day", "2024-01-01", row)
        assert api.is_profilable(1, "day", "2024-01-01") is expected

    def test_fetches_visits_and_profilable(self, api, archive):
        api.is_profilable(1, "day", "2024-01-01")
        assert {"nb_visits", "nb_profilable"} <= set(archive.calls[0]["columns"])

    def test_memoized_within_scope(self, api, archive):
        archive.put(1, "day", "2024-01-01", {"nb_visits": 100, "nb_profilable": 50})

        assert api.is_profilable(1, "day", "2024-01-01") is True
        assert api.is_profilable(1, "day", "2024-01-01") is True

        assert len(archive.calls) == 1

    def test_different_date_computed_separately(self, api, archive):
        api.is_profilable(1, "day", "2024-01-01")
        api.is_profilable(1, "day", "2024-01-02")
        assert len(archive.calls) == 2

    def test_different_segment_computed_separately(self, api, archive):
        api.is_profilable(1, "day", "2024-01-01")
        api.is_profilable(1, "day", "2024-01-01", segment="browserCode==ff")
        api.is_profilable(1, "day", "2024-01-01", segment="browserCode==ff")
        assert len(archive.calls) == 2

    def test_shared_cache_across_instances(self, make_api, archive):
        make_api().is_profilable(1, "day", "2024-01-01")
        make_api().is_profilable(1, "day", "2024-01-01")
        assert len(archive.calls) == 1

    def test_flushed_cache_recomputes(self, api, archive, cache):
        api.is_profilable(1, "day", "2024-01-01")
        cache.flush_all()
        api.is_profilable(1, "day", "2024-01-01")
        assert len(archive.calls) == 2

    def test_multiple_periods_summed(self, api, archive):
        date = "2024-01-01,2024-01-02"
        archive.put(1, "day", date, {"nb_visits": 100, "nb_profilable": 0}, label="2024-01-01")
        archive.put(1, "day", date, {"nb_visits": 100, "nb_profilable": 1}, label="2024-01-02")
        assert api.is_profilable(1, "day", date) is False

    def test_period_without_profilable_data_ignored(self, api, archive):
        date = "2024-01-01,2024-01-02"
        archive.put(1, "day", date, {"nb_visits": 100}, label="2024-01-01")
        archive.put(1, "day", date, {"nb_visits": 100, "nb_profilable": 2}, label="2024-01-02")
        assert api.is_profilable(1, "day", date) is True
