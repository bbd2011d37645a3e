from .core import add, subtract, to_milliseconds, to_milliseconds_or_raise
from .duration import Duration
from .parser import ParseError, ParseResult, parse, parse_or_raise
from .relative import to_relativedelta
from .util import DAY, HOUR, MILLISECOND, MINUTE, MONTH, SECOND, STEPS, WEEK, YEAR

__all__ = [
    "Duration",
    "ParseError",
    "ParseResult",
    "STEPS",
    "parse",
    "parse_or_raise",
    "to_milliseconds",
    "to_milliseconds_or_raise",
    "add",
    "subtract",
    "to_relativedelta",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MONTH",
    "YEAR",
]
