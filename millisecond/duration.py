from collections.abc import Iterator
from dataclasses import dataclass
from datetime import timedelta

from millisecond.util import MULTIPLIERS, STEPS, Step

Quantity = int | float


@dataclass(frozen=True, kw_only=True)
class Duration:
    """Parsed duration with an optional quantity per step.

    Unset steps are None. Quantities keep their sign and their numeric type:
    integer literals stay ints, decimal literals are floats.
    """

    year: Quantity | None = None
    month: Quantity | None = None
    week: Quantity | None = None
    day: Quantity | None = None
    hour: Quantity | None = None
    minute: Quantity | None = None
    second: Quantity | None = None
    millisecond: Quantity | None = None

    def items(self) -> Iterator[tuple[Step, Quantity]]:
        """Yield (step, quantity) for each set step, coarsest first."""
        for step in STEPS:
            quantity = getattr(self, step)
            if quantity is not None:
                yield step, quantity

    def to_milliseconds(self) -> Quantity:
        """Total length in milliseconds.

        The result is an int when every quantity is an int, a float otherwise.
        """
        total: Quantity = 0
        for step, quantity in self.items():
            total += quantity * MULTIPLIERS[step]
        return total

    def to_timedelta(self) -> timedelta:
        return timedelta(milliseconds=self.to_milliseconds())
