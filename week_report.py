"""
week_report.py - print this rolling week vs. the previous one

Usage:
  python week_report.py --base https://jobs.api.mastaskillz.com --date 2025-12-08
"""
import argparse
import asyncio
import logging
from typing import Optional

from jobclick_dashboard.analytics.client_factory import get_client
from jobclick_dashboard.comparison.engine import WeekComparison, compare_weeks
from jobclick_dashboard.dates import parse_date
from jobclick_dashboard.errors import ComparisonFailed


def percent_change(current: int, previous: int) -> Optional[float]:
    if previous == 0:
        return None
    return (current - previous) / previous * 100.0


def _fmt_change(current: int, previous: int) -> str:
    change = percent_change(current, previous)
    return "n/a" if change is None else f"{change:+.1f}%"


def render(comparison: WeekComparison) -> str:
    cur, prev = comparison.current, comparison.previous
    cr, pr = comparison.current_range, comparison.previous_range
    lines = [
        f"CURRENT:  {cr.start_date} .. {cr.end_date}",
        f"PREVIOUS: {pr.start_date} .. {pr.end_date}",
        f"CLICKS:   {cur.total_clicks} vs {prev.total_clicks} ({_fmt_change(cur.total_clicks, prev.total_clicks)})",
        f"URLS:     {cur.unique_urls} vs {prev.unique_urls} ({_fmt_change(cur.unique_urls, prev.unique_urls)})",
    ]
    return "\n".join(lines)


async def main(argv=None) -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--base", default=None, help="analytics service root (default: env/config)")
    parser.add_argument("--date", default=None, help="last day of the current week, YYYY-MM-DD")
    args = parser.parse_args(argv)

    reference = parse_date(args.date) if args.date else None
    client = get_client(args.base)
    try:
        comparison = await compare_weeks(client, reference)
    except ComparisonFailed as exc:
        print(f"FAILED:   {exc}")
        return 1
    finally:
        await client.aclose()

    print(render(comparison))
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    raise SystemExit(asyncio.run(main()))
