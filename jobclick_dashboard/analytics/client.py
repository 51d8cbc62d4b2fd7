"""
HTTP client for the remote analytics service.

Responsibilities:
    - Build the four read-only queries against an injected base URL
    - Parse the `{success, data}` envelope into typed records
    - Map every failure mode onto `RequestFailed`

Design notes:
    - The base URL is configuration owned by the client instance, not a
      module constant; two clients can point at different deployments.
    - `httpx.AsyncClient` is created per client and closed via `aclose()`.
      A custom `transport` can be injected (tests use `httpx.MockTransport`).
    - Inputs are validated before any network call; bad dates or months raise
      `ValidationFailed` and never reach the transport.
"""

import logging
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..dates import parse_date
from ..errors import RequestFailed, ValidationFailed
from .base import BaseAnalyticsClient
from .schemas import ApiEnvelope, RollupDataset, SummaryDataset

log = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

SUMMARY_PATH = "/analytics/summary"
WEEKLY_PATH = "/analytics/weekly"
MONTHLY_PATH = "/analytics/monthly"
RANGE_PATH = "/analytics/range"


class AnalyticsClient(BaseAnalyticsClient):
    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client with its deployment address.

        Args:
            base_url (str): Service root, e.g. "https://jobs.api.example.com".
            timeout (float): Per-request timeout in seconds.
            transport (Optional[httpx.AsyncBaseTransport]): Override for tests.

        Raises:
            ValueError: If base_url is empty.
        """
        if not base_url:
            raise ValueError("base_url is required for the analytics client")
        self.base_url = base_url.rstrip("/")
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def _get(self, path: str, model: Type[ModelT], params: Optional[Dict[str, Any]] = None) -> ModelT:
        """
        Perform one GET and unwrap the envelope.

        Raises:
            RequestFailed: On transport error, non-2xx, unparsable body or success=false.
        """
        try:
            resp = await self._http.get(path, params=params)
        except httpx.HTTPError as exc:
            log.warning("Analytics request %s failed: %s", path, exc)
            raise RequestFailed(None, f"Transport error: {exc}") from exc

        if not resp.is_success:
            raise RequestFailed(resp.status_code, f"Request failed: {resp.status_code}")

        try:
            envelope = ApiEnvelope[model].model_validate_json(resp.content)
        except ValidationError as exc:
            raise RequestFailed(resp.status_code, "Unparsable response body") from exc

        if not envelope.success or envelope.data is None:
            raise RequestFailed(resp.status_code, "Service reported success=false")
        return envelope.data

    async def fetch_summary(self) -> SummaryDataset:
        return await self._get(SUMMARY_PATH, SummaryDataset)

    async def fetch_weekly(self) -> RollupDataset:
        return await self._get(WEEKLY_PATH, RollupDataset)

    async def fetch_monthly(self, year: int, month: int) -> RollupDataset:
        if not 1 <= month <= 12:
            raise ValidationFailed(f"Month must be in 1..12, got {month}")
        return await self._get(MONTHLY_PATH, RollupDataset, params={"year": str(year), "month": str(month)})

    async def fetch_range(self, start_date: str, end_date: str) -> RollupDataset:
        if parse_date(start_date) > parse_date(end_date):
            raise ValidationFailed("Start date cannot be after end date.")
        return await self._get(RANGE_PATH, RollupDataset, params={"startDate": start_date, "endDate": end_date})

    async def aclose(self) -> None:
        await self._http.aclose()
