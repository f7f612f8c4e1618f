"""
Report sinks and number formatting

Checkout and shipping write their human-readable reports to a sink instead
of printing directly, so the same transaction can run against the console
or be captured line by line.
"""

from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputSink(Protocol):
    """Anything that accepts one report line at a time"""

    def write_line(self, line: str) -> None:
        ...


class ConsoleSink:
    """Writes report lines to stdout"""

    def write_line(self, line: str) -> None:
        print(line)


class BufferedSink:
    """Collects report lines in memory"""

    def __init__(self):
        self.lines: list[str] = []

    def write_line(self, line: str) -> None:
        self.lines.append(line)

    def getvalue(self) -> str:
        """Return the collected report as newline-terminated text"""
        return "".join(f"{line}\n" for line in self.lines)

    def clear(self) -> None:
        self.lines = []


def format_amount(value: float) -> str:
    """
    Render a number with one fractional digit, rounding halves up.

    ``format(0.25, ".1f")`` rounds to even; report totals round half up.
    """
    with localcontext() as ctx:
        # Wide enough for every finite float in plain notation
        ctx.prec = 400
        return str(Decimal(repr(float(value))).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def format_grams(value: float) -> str:
    """
    Render a weight the way shipment notices always have.

    Plain decimal notation with at least one fractional digit between 1e-3
    and 1e7, scientific notation (``1.0E7``) outside that range.
    """
    value = float(value)
    if value == 0 or 1e-3 <= abs(value) < 1e7:
        return repr(value)

    sign, digits, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(d) for d in digits)
    mantissa = digits[0] + "." + (digits[1:] or "0")
    return f"{'-' if sign else ''}{mantissa}E{len(digits) - 1 + exponent}"
