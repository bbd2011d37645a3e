from datetime import datetime
from typing import Any

from millisecond.duration import Duration, Quantity
from millisecond.parser import ParseResult, parse


def to_milliseconds(value: str | Duration) -> ParseResult[Quantity]:
    """
    Convert a duration expression or a parsed Duration into milliseconds.

    Args:
        value: Expression to parse, or a Duration (which always succeeds)

    Returns:
        ParseResult holding the millisecond count on success

    Example:
        >>> to_milliseconds("1y 1mo 1d").value
        34236000000
        >>> to_milliseconds("1.5m").value
        90000.0
    """
    if isinstance(value, Duration):
        return ParseResult(success=True, value=value.to_milliseconds(), error=None)

    result = parse(value)
    if not result.success or result.value is None:
        return ParseResult(success=False, value=None, error=result.error)
    return ParseResult(success=True, value=result.value.to_milliseconds(), error=None)


def to_milliseconds_or_raise(value: str | Duration) -> Quantity:
    """Like to_milliseconds(), but return the count directly.

    Raises:
        ParseError: If the expression is invalid
    """
    return to_milliseconds(value).unwrap()


def _check_operands(timestamp: Any, duration: Any) -> None:
    if not isinstance(timestamp, datetime):
        raise TypeError(
            f"Timestamp must be a datetime.\n"
            f"Got {type(timestamp).__name__!r}: {timestamp!r}"
        )
    if not isinstance(duration, Duration):
        raise TypeError(
            f"Duration must be a parsed Duration.\n"
            f"Got {type(duration).__name__!r}: {duration!r}\n"
            f"Hint: parse it first: add(timestamp, parse_or_raise('1h'))"
        )


def add(timestamp: datetime, duration: Duration) -> datetime:
    """Return a new datetime moved forward by the duration.

    Example:
        >>> from datetime import timezone
        >>> from millisecond import parse_or_raise
        >>> now = datetime.now(timezone.utc)
        >>> add(now, parse_or_raise("100ms")) - now
        datetime.timedelta(microseconds=100000)
    """
    _check_operands(timestamp, duration)
    return timestamp + duration.to_timedelta()


def subtract(timestamp: datetime, duration: Duration) -> datetime:
    """Return a new datetime moved backward by the duration."""
    _check_operands(timestamp, duration)
    return timestamp - duration.to_timedelta()
