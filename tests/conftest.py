"""
Global pytest fixtures for the Job Click Dashboard test suite.

Responsibilities:
    - Provide sample datasets for resolver and manager tests
    - Provide a FakeAnalyticsClient and a DashboardManager wired to it
    - Provide a fresh FastAPI TestClient via the app factory for integration tests

Why an app factory?
    `create_app(client=...)` gives every test its own session state and lets
    us inject the fake client instead of the network.
"""

import pytest
from fastapi.testclient import TestClient

from main import create_app
from jobclick_dashboard.manager.dashboard_manager import DashboardManager

from fakes import (
    REFERENCE_DATE,
    FakeAnalyticsClient,
    monthly_dataset,
    range_dataset,
    summary_dataset,
    weekly_dataset,
)


@pytest.fixture
def reference_date():
    return REFERENCE_DATE


@pytest.fixture
def summary():
    return summary_dataset()


@pytest.fixture
def weekly():
    return weekly_dataset()


@pytest.fixture
def monthly():
    return monthly_dataset()


@pytest.fixture
def fake_client(summary, weekly, monthly) -> FakeAnalyticsClient:
    """
    Fake client serving every dataset, plus the two rolling weeks around
    the reference day and one custom range.
    """
    return FakeAnalyticsClient(
        summary=summary,
        weekly=weekly,
        monthly=monthly,
        ranges={
            ("2025-12-02", "2025-12-08"): range_dataset(total_clicks=70),
            ("2025-11-25", "2025-12-01"): range_dataset(total_clicks=50),
            ("2025-11-01", "2025-11-30"): range_dataset(total_clicks=42),
        },
    )


@pytest.fixture
def manager(fake_client, reference_date) -> DashboardManager:
    """DashboardManager pinned to the reference day; nothing loaded yet."""
    return DashboardManager(fake_client, clock=lambda: reference_date)


@pytest.fixture
def client(fake_client, reference_date):
    """
    TestClient with the lifespan running, so the initial load has happened.
    """
    app = create_app(client=fake_client, clock=lambda: reference_date)
    with TestClient(app) as test_client:
        yield test_client
