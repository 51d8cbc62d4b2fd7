"""
Range resolver: reconcile summary, weekly, monthly and custom-range datasets
into one view model for the selected range.

Any combination of present/absent datasets is legitimate ("not yet loaded"
or "fetch failed"), so `resolve` never raises for missing data.
"""

import logging
from datetime import date
from typing import Optional, Union

from ..analytics.schemas import RollupDataset, SummaryDataset
from .rules import (
    DRILLDOWN_OVERRIDES,
    DRILLDOWN_RULES,
    TOTALS_RULES,
    TREND_RULES,
    ResolveContext,
    first_match,
)
from .time_range import TimeRange
from .view_model import ViewModel

log = logging.getLogger(__name__)


def resolve(
    selected_range: Union[TimeRange, str],
    summary: Optional[SummaryDataset] = None,
    weekly: Optional[RollupDataset] = None,
    monthly: Optional[RollupDataset] = None,
    custom: Optional[RollupDataset] = None,
    *,
    reference_date: date,
) -> ViewModel:
    """
    Build the view model for `selected_range`.

    Args:
        selected_range: Preset id or TimeRange.CUSTOM_RANGE.
        summary, weekly, monthly: Cached datasets; None when absent.
        custom: Custom-range rollup; only consulted for CUSTOM_RANGE.
        reference_date: Local day used to locate today/yesterday entries.

    Raises:
        ValidationFailed: If selected_range is not a known id.
    """
    if not isinstance(selected_range, TimeRange):
        selected_range = TimeRange.parse(selected_range)

    ctx = ResolveContext(
        selected_range=selected_range,
        reference_date=reference_date,
        summary=summary,
        weekly=weekly,
        monthly=monthly,
        custom=custom,
    )

    totals_rule = first_match(TOTALS_RULES, ctx)
    trend_rule = first_match(TREND_RULES, ctx)
    drilldown_rule = first_match(DRILLDOWN_RULES, ctx)

    drilldown = drilldown_rule.extract(ctx)
    applied = []
    for override in DRILLDOWN_OVERRIDES:
        if override.applies(ctx):
            drilldown = override.apply(ctx, drilldown)
            applied.append(override.name)

    log.debug(
        "Resolved %s: totals=%s trend=%s drilldown=%s overrides=%s",
        selected_range.value, totals_rule.name, trend_rule.name, drilldown_rule.name, applied,
    )

    return ViewModel(
        selected_range=selected_range,
        totals=totals_rule.extract(ctx),
        top_performers=drilldown.top_performers,
        location_breakdown=drilldown.location_breakdown,
        job_title_breakdown=drilldown.job_title_breakdown,
        trend_series=trend_rule.extract(ctx),
    )
