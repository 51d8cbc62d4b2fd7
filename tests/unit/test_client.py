"""
Unit tests for AnalyticsClient over a mocked HTTP transport.

Covers:
    - paths and query parameters for the four queries
    - envelope unwrapping into typed records
    - RequestFailed on non-2xx, success=false, unparsable body, transport error
    - local validation issues zero network calls
"""

import asyncio
import json

import httpx
import pytest

from jobclick_dashboard.analytics.client import AnalyticsClient
from jobclick_dashboard.errors import RequestFailed, ValidationFailed

BASE = "https://analytics.test"


class Recorder:
    """MockTransport handler returning a canned response and recording requests."""

    def __init__(self, status=200, body=None, raw=None, exc=None):
        self.status = status
        self.body = body if body is not None else {"success": True, "data": {}}
        self.raw = raw
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        content = self.raw if self.raw is not None else json.dumps(self.body).encode()
        return httpx.Response(self.status, content=content, headers={"content-type": "application/json"})


def _run(recorder, call):
    async def go():
        client = AnalyticsClient(BASE, transport=httpx.MockTransport(recorder))
        try:
            return await call(client)
        finally:
            await client.aclose()

    return asyncio.run(go())


def test_fetch_summary_parses_envelope():
    rec = Recorder(body={"success": True, "data": {"today": {"clicks": 4, "uniqueUrls": 2}}})
    summary = _run(rec, lambda c: c.fetch_summary())
    assert summary.today.clicks == 4
    assert rec.requests[0].url.path == "/analytics/summary"


def test_fetch_weekly_path():
    rec = Recorder(body={"success": True, "data": {"totalClicks": 9}})
    weekly = _run(rec, lambda c: c.fetch_weekly())
    assert weekly.total_clicks == 9
    assert str(rec.requests[0].url) == f"{BASE}/analytics/weekly"


def test_fetch_monthly_sends_year_and_month():
    rec = Recorder()
    _run(rec, lambda c: c.fetch_monthly(2025, 12))
    params = rec.requests[0].url.params
    assert rec.requests[0].url.path == "/analytics/monthly"
    assert params["year"] == "2025" and params["month"] == "12"


def test_fetch_range_sends_dates():
    rec = Recorder()
    _run(rec, lambda c: c.fetch_range("2025-12-01", "2025-12-08"))
    params = rec.requests[0].url.params
    assert rec.requests[0].url.path == "/analytics/range"
    assert params["startDate"] == "2025-12-01" and params["endDate"] == "2025-12-08"


def test_single_day_range_is_allowed():
    rec = Recorder()
    _run(rec, lambda c: c.fetch_range("2025-12-08", "2025-12-08"))
    assert len(rec.requests) == 1


def test_non_2xx_raises_request_failed_with_status():
    rec = Recorder(status=503, body={"success": True, "data": {}})
    with pytest.raises(RequestFailed) as exc:
        _run(rec, lambda c: c.fetch_weekly())
    assert exc.value.status == 503


def test_success_false_is_failure_even_with_data():
    rec = Recorder(body={"success": False, "data": {"totalClicks": 1}})
    with pytest.raises(RequestFailed) as exc:
        _run(rec, lambda c: c.fetch_weekly())
    assert exc.value.status == 200


def test_unparsable_body_raises_request_failed():
    rec = Recorder(raw=b"<html>oops</html>")
    with pytest.raises(RequestFailed, match="Unparsable"):
        _run(rec, lambda c: c.fetch_summary())


def test_transport_error_raises_request_failed_without_status():
    rec = Recorder(exc=httpx.ConnectError("boom"))
    with pytest.raises(RequestFailed) as exc:
        _run(rec, lambda c: c.fetch_summary())
    assert exc.value.status is None


def test_out_of_order_range_fails_locally_without_network():
    rec = Recorder()
    with pytest.raises(ValidationFailed):
        _run(rec, lambda c: c.fetch_range("2025-12-10", "2025-12-01"))
    assert rec.requests == []


@pytest.mark.parametrize("month", [0, 13])
def test_month_out_of_range_fails_locally(month):
    rec = Recorder()
    with pytest.raises(ValidationFailed):
        _run(rec, lambda c: c.fetch_monthly(2025, month))
    assert rec.requests == []


def test_empty_base_url_rejected():
    with pytest.raises(ValueError):
        AnalyticsClient("")
