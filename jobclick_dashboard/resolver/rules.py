"""
Ordered rule tables for range resolution.

Each view-model field is derived by walking a list of rules in order; the
first rule whose predicate holds supplies the value. Overrides then run in
order over the drill-down result. Keeping the precedence as data makes every
branch individually testable and the order auditable in one place.

Precedence summary:
    totals     : custom range > summary[selected] > zeros
    trend      : custom range > monthly (thisMonth) > weekly > empty
    drill-down : custom range > monthly (thisMonth) > weekly
                 > summary.thisMonth breakdowns (thisMonth) > empty
    overrides  : single-day narrowing (today/yesterday, matching weekly day)
                 then summary top performers (thisWeek/thisMonth, non-empty)

While a custom range is selected only the custom dataset is consulted.
"""

from dataclasses import dataclass
from datetime import date
from typing import Callable, Generic, List, Optional, Sequence, TypeVar

from ..analytics.schemas import DailyBreakdown, MetricPair, RollupDataset, SummaryDataset
from ..dates import today, yesterday
from .time_range import TimeRange
from .view_model import Drilldown, TrendPoint

T = TypeVar("T")


@dataclass(frozen=True)
class ResolveContext:
    """Everything a rule may look at. Absent datasets are None."""

    selected_range: TimeRange
    reference_date: date
    summary: Optional[SummaryDataset] = None
    weekly: Optional[RollupDataset] = None
    monthly: Optional[RollupDataset] = None
    custom: Optional[RollupDataset] = None

    @property
    def custom_active(self) -> bool:
        return self.selected_range is TimeRange.CUSTOM_RANGE and self.custom is not None

    @property
    def preset(self) -> bool:
        return self.selected_range.is_preset


@dataclass(frozen=True)
class Rule(Generic[T]):
    name: str
    applies: Callable[[ResolveContext], bool]
    extract: Callable[[ResolveContext], T]


@dataclass(frozen=True)
class Override(Generic[T]):
    name: str
    applies: Callable[[ResolveContext], bool]
    apply: Callable[[ResolveContext, T], T]


def first_match(rules: Sequence[Rule[T]], ctx: ResolveContext) -> Rule[T]:
    for rule in rules:
        if rule.applies(ctx):
            return rule
    raise LookupError("rule table has no fallback")  # pragma: no cover


# ---------------------------------------------------------------------
# Projections
# ---------------------------------------------------------------------
def _always(ctx: ResolveContext) -> bool:
    return True


def _trend(dataset: RollupDataset) -> List[TrendPoint]:
    return [TrendPoint(date=d.date, total_clicks=d.total_clicks) for d in dataset.daily_breakdown]


def _drilldown(dataset: RollupDataset) -> Drilldown:
    return Drilldown(
        location_breakdown=dataset.location_breakdown,
        job_title_breakdown=dataset.job_title_breakdown,
        top_performers=dataset.top_performers,
    )


def _monthly_for_month(ctx: ResolveContext) -> bool:
    return ctx.selected_range is TimeRange.THIS_MONTH and ctx.monthly is not None


def _weekly_for_preset(ctx: ResolveContext) -> bool:
    return ctx.preset and ctx.weekly is not None


# ---------------------------------------------------------------------
# Totals
# ---------------------------------------------------------------------
def _summary_totals(ctx: ResolveContext) -> MetricPair:
    period = ctx.summary.for_range(ctx.selected_range.value)
    return MetricPair(clicks=period.clicks, unique_urls=period.unique_urls)


TOTALS_RULES: List[Rule[MetricPair]] = [
    Rule(
        "custom_range",
        lambda ctx: ctx.custom_active,
        lambda ctx: MetricPair(clicks=ctx.custom.total_clicks, unique_urls=ctx.custom.unique_urls),
    ),
    Rule("summary", lambda ctx: ctx.preset and ctx.summary is not None, _summary_totals),
    Rule("not_loaded", _always, lambda ctx: MetricPair()),
]


# ---------------------------------------------------------------------
# Trend series
# ---------------------------------------------------------------------
TREND_RULES: List[Rule[List[TrendPoint]]] = [
    Rule("custom_range", lambda ctx: ctx.custom_active, lambda ctx: _trend(ctx.custom)),
    Rule("monthly", _monthly_for_month, lambda ctx: _trend(ctx.monthly)),
    # today/yesterday keep the full-week series; only the drill-down narrows
    Rule("weekly", _weekly_for_preset, lambda ctx: _trend(ctx.weekly)),
    Rule("empty", _always, lambda ctx: []),
]


# ---------------------------------------------------------------------
# Drill-down (breakdowns + top performers)
# ---------------------------------------------------------------------
def _has_month_summary_breakdowns(ctx: ResolveContext) -> bool:
    if ctx.selected_range is not TimeRange.THIS_MONTH or ctx.summary is None:
        return False
    month = ctx.summary.this_month
    return month.location_breakdown is not None or month.job_title_breakdown is not None


def _month_summary_drilldown(ctx: ResolveContext) -> Drilldown:
    month = ctx.summary.this_month
    return Drilldown(
        location_breakdown=month.location_breakdown or {},
        job_title_breakdown=month.job_title_breakdown or {},
    )


DRILLDOWN_RULES: List[Rule[Drilldown]] = [
    Rule("custom_range", lambda ctx: ctx.custom_active, lambda ctx: _drilldown(ctx.custom)),
    Rule("monthly", _monthly_for_month, lambda ctx: _drilldown(ctx.monthly)),
    Rule("weekly", _weekly_for_preset, lambda ctx: _drilldown(ctx.weekly)),
    Rule("month_summary", _has_month_summary_breakdowns, _month_summary_drilldown),
    Rule("empty", _always, lambda ctx: Drilldown()),
]


def target_day(ctx: ResolveContext) -> Optional[DailyBreakdown]:
    """The weekly entry for the selected single day, or None."""
    if not ctx.selected_range.is_single_day or ctx.weekly is None:
        return None
    if ctx.selected_range is TimeRange.TODAY:
        wanted = today(ctx.reference_date)
    else:
        wanted = yesterday(ctx.reference_date)
    return ctx.weekly.day(wanted)


def _narrow_to_day(ctx: ResolveContext, current: Drilldown) -> Drilldown:
    day = target_day(ctx)
    if day is None:
        return current
    return Drilldown(
        location_breakdown=day.location_breakdown,
        job_title_breakdown=day.job_title_breakdown,
        top_performers=day.top_short_codes,
    )


def _summary_performers(ctx: ResolveContext):
    if ctx.summary is None:
        return []
    if ctx.selected_range is TimeRange.THIS_WEEK:
        return ctx.summary.this_week.top_performers
    if ctx.selected_range is TimeRange.THIS_MONTH:
        return ctx.summary.this_month.top_performers
    return []


DRILLDOWN_OVERRIDES: List[Override[Drilldown]] = [
    # No matching day keeps the week-level values rather than emptying them.
    Override("single_day", lambda ctx: target_day(ctx) is not None, _narrow_to_day),
    # Never applies to today/yesterday or to a custom range.
    Override(
        "summary_top_performers",
        lambda ctx: bool(_summary_performers(ctx)),
        lambda ctx, current: current.model_copy(update={"top_performers": list(_summary_performers(ctx))}),
    ),
]
