"""Seed the default business calendar for a fresh install.

Adds a weekly closure (Monday unless ``--weekday`` is given) and the
New Year holiday period for the current and next year.
"""
from __future__ import annotations

import argparse
import asyncio
from datetime import date

from sqlalchemy import select

from bistro.core.timezones import restaurant_today
from bistro.db.session import get_sessionmaker
from bistro.models.closure import PeriodClosure, RecurringClosedDay

DEFAULT_WEEKDAY = 1
NEW_YEAR_REASON = "New Year holidays"


def _new_year_range(year: int) -> tuple[date, date]:
    return date(year, 12, 30), date(year + 1, 1, 3)


async def seed_calendar(weekday: int = DEFAULT_WEEKDAY) -> None:
    sessionmaker = get_sessionmaker()
    created = 0
    async with sessionmaker() as session:
        existing_day = await session.execute(
            select(RecurringClosedDay).where(RecurringClosedDay.day_of_week == weekday)
        )
        if existing_day.scalar_one_or_none() is None:
            session.add(RecurringClosedDay(day_of_week=weekday, reason="Regular holiday"))
            created += 1

        this_year = restaurant_today().year
        for year in (this_year, this_year + 1):
            start, end = _new_year_range(year)
            existing_period = await session.execute(
                select(PeriodClosure).where(
                    PeriodClosure.start_date == start, PeriodClosure.end_date == end
                )
            )
            if existing_period.scalar_one_or_none() is None:
                session.add(PeriodClosure(start_date=start, end_date=end, reason=NEW_YEAR_REASON))
                created += 1
        if created:
            await session.commit()
    print(f"Seeded {created} closure rule(s).")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--weekday",
        type=int,
        choices=range(7),
        default=DEFAULT_WEEKDAY,
        help="Weekly closing day, 0 = Sunday",
    )
    args = parser.parse_args()
    asyncio.run(seed_calendar(args.weekday))


if __name__ == "__main__":
    main()
