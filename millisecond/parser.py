"""Tokenizer and unit resolver for human-readable durations.

Input is trimmed, lower-cased and split on plain spaces. Each fragment is a
numeric literal, a unit label, or both run together ("1.5mo"). A bare
literal followed by a label fragment ("1 hour") is joined into one token,
and the resulting steps must run from coarsest to finest:

    >>> parse_or_raise("1h 1m 1s")
    Duration(year=None, month=None, week=None, day=None, hour=1, minute=1, second=1, millisecond=None)
    >>> parse("1d 1mo 1y").success
    False
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import structlog
from typing_extensions import override

from millisecond.duration import Duration, Quantity
from millisecond.util import STEPS, UNITS, Step

logger = structlog.get_logger()

# A literal must start with a digit after the optional sign: ".5" is invalid
_INTEGER = re.compile(r"-?[0-9]+")
_FLOAT = re.compile(r"-?[0-9]+(?:\.[0-9]+)?(?:e[-+]?[0-9]+)?")

T = TypeVar("T")


class ParseError(ValueError):
    """Raised when a duration expression cannot be parsed.

    Attributes:
        text: The original input, unchanged
        reason: Short description of what went wrong
    """

    def __init__(self, text: Any, reason: str = "invalid format"):
        self.text: Any = text
        self.reason: str = reason
        super().__init__(text, reason)

    @override
    def __str__(self) -> str:
        return f"Format is invalid: {self.text!r}"


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of a non-raising parse.

    Attributes:
        success: True if the input was parsed
        value: The parsed value if successful, None if failed
        error: The ParseError describing the failure, None if successful
    """

    success: bool
    value: T | None
    error: ParseError | None

    def unwrap(self) -> T:
        """Return the value, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def _fragments(text: str) -> list[str]:
    # Only the space character separates fragments; tabs stay inside them
    return [fragment for fragment in text.strip().lower().split(" ") if fragment]


def _tokenize(fragment: str) -> tuple[Quantity | None, str]:
    """Split a fragment into its numeric prefix and unit label.

    The quantity is None when the fragment has no numeric prefix.
    """
    if "." in fragment:
        match = _FLOAT.match(fragment)
        if match is None:
            return None, fragment
        return float(match.group()), fragment[match.end() :]

    match = _INTEGER.match(fragment)
    if match is None:
        return None, fragment
    return int(match.group()), fragment[match.end() :]


def _group(text: str, fragments: list[str]) -> list[tuple[Quantity, str]]:
    """Pair each quantity with its label.

    Two states: no pending quantity, or a bare quantity waiting for a
    label fragment. Any other transition fails.
    """
    grouped: list[tuple[Quantity, str]] = []
    pending: Quantity | None = None

    for fragment in fragments:
        quantity, label = _tokenize(fragment)
        if quantity is not None and not math.isfinite(quantity):
            raise ParseError(text, "quantity out of range")
        if pending is None:
            if quantity is None:
                raise ParseError(text, f"unit {label!r} has no quantity")
            if label:
                grouped.append((quantity, label))
            else:
                pending = quantity
        else:
            if quantity is not None:
                raise ParseError(text, f"quantity {pending!r} has no unit")
            grouped.append((pending, label))
            pending = None

    if pending is not None:
        # A lone bare number counts milliseconds
        if len(fragments) > 1:
            raise ParseError(text, f"quantity {pending!r} has no unit")
        grouped.append((pending, ""))

    return grouped


def _resolve(text: str, grouped: list[tuple[Quantity, str]]) -> Duration:
    """Match labels to steps, enforcing strictly decreasing step order."""
    if not grouped:
        raise ParseError(text, "empty input")

    values: dict[Step, Quantity] = {}
    previous = -1
    for quantity, label in grouped:
        step = UNITS.get(label)
        if step is None:
            raise ParseError(text, f"unknown unit {label!r}")
        position = STEPS.index(step)
        if position <= previous:
            raise ParseError(text, f"unit {label!r} out of order")
        values[step] = quantity
        previous = position

    return Duration(**values)


def parse(text: Any) -> ParseResult[Duration]:
    """
    Parse a duration expression without raising.

    Args:
        text: Expression such as "1h 30m", "2.5 hrs", "-3 days" or "100"

    Returns:
        ParseResult holding the Duration on success, or the ParseError
        on failure

    Example:
        >>> parse("2 days").value.day
        2
        >>> parse("RANDOM STRING").error.reason
        "unit 'random' has no quantity"
    """
    try:
        if not isinstance(text, str):
            raise ParseError(text, f"expected str, got {type(text).__name__}")
        duration = _resolve(text, _group(text, _fragments(text)))
    except ParseError as error:
        logger.debug("duration_parse_failed", text=text, reason=error.reason)
        return ParseResult(success=False, value=None, error=error)
    return ParseResult(success=True, value=duration, error=None)


def parse_or_raise(text: Any) -> Duration:
    """Like parse(), but return the Duration directly.

    Raises:
        ParseError: If the expression is invalid
    """
    return parse(text).unwrap()
