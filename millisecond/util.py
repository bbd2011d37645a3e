"""Step constants and unit aliases for millisecond.

Time unit constants represent durations in milliseconds.
Month and year are fixed-length approximations (30 and 365.25 days).
"""

from typing import Literal, TypeAlias

Step: TypeAlias = Literal[
    "year", "month", "week", "day", "hour", "minute", "second", "millisecond"
]

# Coarsest first; parsed steps must appear in this order
STEPS: tuple[Step, ...] = (
    "year",
    "month",
    "week",
    "day",
    "hour",
    "minute",
    "second",
    "millisecond",
)

# Time unit constants (all values in milliseconds)
MILLISECOND = 1
SECOND = 1000
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
MONTH = 30 * DAY
YEAR = round(365.25 * DAY)

MULTIPLIERS: dict[Step, int] = {
    "year": YEAR,
    "month": MONTH,
    "week": WEEK,
    "day": DAY,
    "hour": HOUR,
    "minute": MINUTE,
    "second": SECOND,
    "millisecond": MILLISECOND,
}

_ALIASES: dict[Step, tuple[str, ...]] = {
    "year": ("years", "year", "yrs", "yr", "y"),
    "month": ("months", "month", "mo"),
    "week": ("weeks", "week", "w"),
    "day": ("days", "day", "d"),
    "hour": ("hours", "hour", "hrs", "hr", "h"),
    "minute": ("minutes", "minute", "mins", "min", "m"),
    "second": ("seconds", "second", "secs", "sec", "s"),
    # A bare number is a millisecond count
    "millisecond": ("milliseconds", "millisecond", "msecs", "msec", "ms", ""),
}

# Lower-cased unit label -> step
UNITS: dict[str, Step] = {
    alias: step for step, aliases in _ALIASES.items() for alias in aliases
}
