"""
Main API module for the Job Click Dashboard.

Responsibilities:
    - Expose one dashboard session over HTTP for the presentation layer
    - Load summary/weekly/monthly analytics at startup (each independently)
    - Switch between preset ranges and a custom date range
    - Serve the resolved view model, ranked breakdowns and week comparison

Architecture:
    - App Factory pattern (create_app) for test isolation and DI.
    - The analytics client is injected; by default it is built from env.
    - DashboardManager owns session state; routes only translate errors.
"""

import logging
from contextlib import asynccontextmanager
from datetime import date
from typing import Any, Callable, Dict, Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from jobclick_dashboard.analytics.base import BaseAnalyticsClient
from jobclick_dashboard.analytics.client_factory import get_client
from jobclick_dashboard.config import settings
from jobclick_dashboard.dates import local_today
from jobclick_dashboard.errors import ComparisonFailed, RequestFailed, ValidationFailed
from jobclick_dashboard.manager.dashboard_manager import DashboardManager
from jobclick_dashboard.resolver.jobs import (
    JOB_TITLE_TOP_N,
    LOCATION_TOP_N,
    filter_jobs,
    rank_breakdown,
    sort_jobs,
)


class CustomRangeRequest(BaseModel):
    """Request payload for applying a custom date range."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    start_date: Optional[str] = None
    end_date: Optional[str] = None


def create_app(
    client: Optional[BaseAnalyticsClient] = None,
    clock: Callable[[], date] = local_today,
) -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Args:
        client (Optional[BaseAnalyticsClient]): Analytics source; built from
            env via get_client() when omitted.
        clock (Callable[[], date]): Supplies the local day for "today".

    Returns:
        FastAPI: An application with its own isolated dashboard session.
    """
    log = logging.getLogger("jobclick")
    if not logging.getLogger().handlers:
        logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL, logging.INFO))

    analytics_client = client or get_client()
    manager = DashboardManager(analytics_client, default_range=settings.DEFAULT_RANGE, clock=clock)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        loaded = await manager.load_initial()
        log.info("Initial analytics load: %s", loaded)
        yield
        await analytics_client.aclose()

    app = FastAPI(
        title="Job Click Dashboard",
        description="Click analytics for shortened job-posting URLs across time ranges",
        docs_url="/docs",
        lifespan=lifespan,
    )
    app.state.manager = manager

    def _dashboard(search: Optional[str], sort: str, direction: Optional[str]) -> Dict[str, Any]:
        view = manager.view()
        try:
            jobs = sort_jobs(filter_jobs(view.top_performers, search), key=sort, direction=direction)
        except ValidationFailed as ve:
            raise HTTPException(status_code=400, detail=ve.reason)
        body = view.model_copy(update={"top_performers": jobs}).model_dump(by_alias=True, mode="json")
        return {**manager.status(), "view": body}

    @app.get("/health_dashboard")
    def health_dashboard():
        return {"status": "ok"}

    # ----------------------------------------------------------------
    # Routes
    # ----------------------------------------------------------------
    @app.get("/dashboard")
    def dashboard(
        search: Optional[str] = Query(None, description="Filter top jobs by title or location."),
        sort: str = Query("clicks", description="Sort top jobs by 'clicks' or 'location'."),
        direction: Optional[str] = Query(None, description="'asc' or 'desc'; defaults per sort key."),
    ) -> Dict[str, Any]:
        """
        Current session state plus the resolved view model.

        Returns:
            dict: selectedRange, presetRange, customRange, slots, view.
        """
        return _dashboard(search, sort, direction)

    @app.get("/dashboard/breakdowns")
    def dashboard_breakdowns() -> Dict[str, Any]:
        """Location (top 10) and job-title (top 8 + Other) breakdowns of the current view."""
        view = manager.view()
        return {
            "selectedRange": view.selected_range.value,
            "locations": rank_breakdown(view.location_breakdown, LOCATION_TOP_N, other_label=None),
            "jobTitles": rank_breakdown(view.job_title_breakdown, JOB_TITLE_TOP_N),
        }

    @app.post("/dashboard/refresh")
    async def refresh() -> Dict[str, Any]:
        """Re-run the concurrent summary/weekly/monthly load."""
        loaded = await manager.load_initial()
        return {"loaded": loaded, **manager.status()}

    @app.post("/dashboard/range/{time_range}")
    def select_range(time_range: str) -> Dict[str, Any]:
        try:
            manager.select_range(time_range)
        except ValidationFailed as ve:
            raise HTTPException(status_code=400, detail=ve.reason)
        return _dashboard(None, "clicks", None)

    @app.post("/dashboard/custom-range")
    async def apply_custom_range(req: CustomRangeRequest) -> Dict[str, Any]:
        """
        Activate a custom date range.

        Raises:
            HTTPException: 400 on invalid dates (no upstream call), 502 if the
                range fetch fails.
        """
        try:
            await manager.apply_custom_range(req.start_date, req.end_date)
        except ValidationFailed as ve:
            raise HTTPException(status_code=400, detail=ve.reason)
        except RequestFailed:
            raise HTTPException(status_code=502, detail=manager.custom_error)
        return _dashboard(None, "clicks", None)

    @app.delete("/dashboard/custom-range")
    def clear_custom_range() -> Dict[str, Any]:
        manager.clear_custom_range()
        return _dashboard(None, "clicks", None)

    @app.get("/dashboard/compare")
    async def compare() -> Dict[str, Any]:
        """This rolling week vs. the previous one; 502 unless both windows load."""
        try:
            comparison = await manager.compare_weeks()
        except ComparisonFailed as cf:
            raise HTTPException(status_code=502, detail=cf.reason)
        return comparison.model_dump(by_alias=True, mode="json")

    return app


# `uvicorn main:app --reload` and `from main import app` continue to work.
app = create_app()
