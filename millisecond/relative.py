"""Conversion of parsed durations to dateutil's relativedelta.

relativedelta rejects fractional years and months, so the coarse steps are
folded into days here (year = 365 days, month = 30 days). This differs from
the 365.25-day year used for millisecond totals.
"""

from dateutil.relativedelta import relativedelta

from millisecond.duration import Duration

# Days per step for the steps relativedelta cannot hold fractionally
_DAYS = {
    "year": 365,
    "month": 30,
    "week": 7,
    "day": 1,
}


def to_relativedelta(duration: Duration) -> relativedelta:
    """
    Convert a Duration into a normalized relativedelta.

    Args:
        duration: Parsed duration

    Returns:
        relativedelta with fractional quantities spilled into finer fields

    Example:
        >>> from millisecond import parse_or_raise
        >>> to_relativedelta(parse_or_raise("1d 1h"))
        relativedelta(days=+1, hours=+1)
        >>> to_relativedelta(parse_or_raise("1.5h"))
        relativedelta(hours=+1, minutes=+30)
    """
    days: int | float = 0
    for step, quantity in duration.items():
        if step in _DAYS:
            days += quantity * _DAYS[step]

    delta = relativedelta(
        days=days,
        hours=duration.hour or 0,
        minutes=duration.minute or 0,
        seconds=duration.second or 0,
        microseconds=(duration.millisecond or 0) * 1000,
    )
    return delta.normalized()
