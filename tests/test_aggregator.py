"""
Tests for report aggregation.
"""

import pytest

from login_finder.core.aggregator import aggregate
from login_finder.models.report import ProbeOutcome


class TestAggregate:
    """Test the successful-subset filter and report shape."""

    def test_successful_is_status_200_to_399_in_order(self):
        tested = [
            ("https://a", ProbeOutcome.success(404, "https://a")),
            ("https://b", ProbeOutcome.success(302, "https://b/")),
            ("https://c", ProbeOutcome.failure("timeout")),
            ("https://d", ProbeOutcome.success(200, "https://d/login")),
            ("https://e", ProbeOutcome.success(199, "https://e")),
            ("https://f", ProbeOutcome.success(400, "https://f")),
            ("https://g", ProbeOutcome.success(399, "https://g")),
        ]

        report = aggregate("example.com", ["mx.example.com (prio 10)"], tested)

        assert [t.guess for t in report.tested] == [g for g, _ in tested]
        assert [t.guess for t in report.successful] == ["https://b", "https://d", "https://g"]

    def test_entry_fields(self):
        report = aggregate("example.com", [], [
            ("https://a", ProbeOutcome.success(404, "https://a/final")),
            ("https://b", ProbeOutcome.failure("connection refused")),
        ])

        responded, failed = report.tested
        assert (responded.ok, responded.status, responded.info_url, responded.error) == \
            (True, 404, "https://a/final", None)
        assert (failed.ok, failed.status, failed.info_url, failed.error) == \
            (False, None, None, "connection refused")
        assert report.successful == []

    def test_serializes_with_camel_case_keys(self):
        report = aggregate("example.com", ["mx.example.com (prio 10)"], [
            ("https://a", ProbeOutcome.success(200, "https://a")),
        ])

        data = report.model_dump(by_alias=True)

        assert data == {
            "domain": "example.com",
            "mxRecords": ["mx.example.com (prio 10)"],
            "tested": [{"guess": "https://a", "ok": True, "status": 200, "infoUrl": "https://a", "error": None}],
            "successful": [{"guess": "https://a", "ok": True, "status": 200, "infoUrl": "https://a", "error": None}],
        }


class TestProbeOutcome:
    """Test the success/failure exclusivity of outcomes."""

    @pytest.mark.parametrize("kwargs", [
        {},
        {"status": 200, "final_url": "https://a", "error": "boom"},
    ])
    def test_exactly_one_of_status_or_error(self, kwargs):
        with pytest.raises(ValueError):
            ProbeOutcome(**kwargs)
