# standhub/repos/filters.py
from datetime import date, datetime, timedelta

from standhub.utils.clock import as_utc, start_of_day


def date_window(stmt, column, start: date | None = None, end: date | None = None):
    """Inclusive [start, end] on a DATE column. Bounds are independent."""
    if start is not None:
        stmt = stmt.where(column >= start)
    if end is not None:
        stmt = stmt.where(column <= end)
    return stmt


def datetime_window(stmt, column, start=None, end=None):
    """Inclusive window on a timestamp column.

    Dates cover whole days: an end date of 2024-03-01 keeps everything up to
    2024-03-01 23:59:59.999999.
    """
    if start is not None:
        if isinstance(start, datetime):
            stmt = stmt.where(column >= as_utc(start))
        else:
            stmt = stmt.where(column >= start_of_day(start))

    if end is not None:
        if isinstance(end, datetime):
            stmt = stmt.where(column <= as_utc(end))
        else:
            stmt = stmt.where(column < start_of_day(end + timedelta(days=1)))

    return stmt
