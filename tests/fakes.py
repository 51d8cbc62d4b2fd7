"""
In-memory test doubles and sample datasets shared across the suite.

The sample week is the rolling window 2025-12-02 .. 2025-12-08 and the
reference day used throughout is 2025-12-08 ("today").
"""

from datetime import date

from jobclick_dashboard.analytics.base import BaseAnalyticsClient
from jobclick_dashboard.analytics.schemas import RollupDataset, SummaryDataset
from jobclick_dashboard.errors import RequestFailed

REFERENCE_DATE = date(2025, 12, 8)


def performer(code, clicks, title="Nurse", location="Sydney"):
    return {
        "shortCode": code,
        "clicks": clicks,
        "jobTitle": title,
        "location": location,
        "originalUrl": f"https://jobs.example.com/{code}",
    }


def day(date_str, clicks, location=None, titles=None, performers=None):
    return {
        "date": date_str,
        "totalClicks": clicks,
        "uniqueUrls": max(1, clicks // 2),
        "topShortCodes": performers or [],
        "locationBreakdown": location or {},
        "jobTitleBreakdown": titles or {},
    }


def weekly_dataset(**overrides) -> RollupDataset:
    payload = {
        "totalClicks": 70,
        "uniqueUrls": 20,
        "dailyBreakdown": [
            day("2025-12-02", 5),
            day("2025-12-03", 6),
            day("2025-12-04", 7),
            day("2025-12-05", 8),
            day("2025-12-06", 9),
            day("2025-12-07", 15, {"Perth": 15}, {"Chef": 15}, [performer("yday1", 15, "Chef", "Perth")]),
            day("2025-12-08", 20, {"Hobart": 20}, {"Welder": 20}, [performer("today1", 20, "Welder", "Hobart")]),
        ],
        "topPerformers": [performer("week1", 10)],
        "locationBreakdown": {"Sydney": 50, "Perth": 20},
        "jobTitleBreakdown": {"Nurse": 40, "Chef": 30},
    }
    payload.update(overrides)
    return RollupDataset.model_validate(payload)


def monthly_dataset(**overrides) -> RollupDataset:
    payload = {
        "totalClicks": 300,
        "uniqueUrls": 80,
        "dailyBreakdown": [day("2025-12-01", 100), day("2025-12-08", 200)],
        "topPerformers": [performer("month1", 120, "Driver", "Darwin")],
        "locationBreakdown": {"Darwin": 300},
        "jobTitleBreakdown": {"Driver": 300},
    }
    payload.update(overrides)
    return RollupDataset.model_validate(payload)


def range_dataset(total_clicks=42, **overrides) -> RollupDataset:
    payload = {
        "totalClicks": total_clicks,
        "uniqueUrls": 7,
        "dailyBreakdown": [day("2025-11-01", total_clicks)],
        "topPerformers": [performer("range1", total_clicks, "Pilot", "Cairns")],
        "locationBreakdown": {"Cairns": total_clicks},
        "jobTitleBreakdown": {"Pilot": total_clicks},
    }
    payload.update(overrides)
    return RollupDataset.model_validate(payload)


def summary_dataset(week_performers=None, month_performers=None, month_breakdowns=False) -> SummaryDataset:
    this_month = {"clicks": 300, "uniqueUrls": 80, "topPerformers": month_performers or []}
    if month_breakdowns:
        this_month["locationBreakdown"] = {"Adelaide": 9}
        this_month["jobTitleBreakdown"] = {"Plumber": 9}
    return SummaryDataset.model_validate(
        {
            "today": {"clicks": 20, "uniqueUrls": 10},
            "yesterday": {"clicks": 15, "uniqueUrls": 7},
            "thisWeek": {"clicks": 70, "uniqueUrls": 20, "topPerformers": week_performers or []},
            "thisMonth": this_month,
        }
    )


class FakeAnalyticsClient(BaseAnalyticsClient):
    """
    Canned datasets keyed by operation. A None dataset, or a name listed in
    `failures`, raises RequestFailed. `ranges` maps (start, end) -> dataset.
    Every call is recorded in `calls`.
    """

    def __init__(self, summary=None, weekly=None, monthly=None, ranges=None, failures=()):
        self.summary = summary
        self.weekly = weekly
        self.monthly = monthly
        self.ranges = ranges or {}
        self.failures = set(failures)
        self.calls = []
        self.closed = False

    def _result(self, name, value):
        if name in self.failures or value is None:
            raise RequestFailed(503, f"{name} unavailable")
        return value

    async def fetch_summary(self):
        self.calls.append(("summary",))
        return self._result("summary", self.summary)

    async def fetch_weekly(self):
        self.calls.append(("weekly",))
        return self._result("weekly", self.weekly)

    async def fetch_monthly(self, year, month):
        self.calls.append(("monthly", year, month))
        return self._result("monthly", self.monthly)

    async def fetch_range(self, start_date, end_date):
        self.calls.append(("range", start_date, end_date))
        return self._result(f"range:{start_date}", self.ranges.get((start_date, end_date)))

    async def aclose(self):
        self.closed = True

    def count(self, name):
        return sum(1 for call in self.calls if call[0] == name)
