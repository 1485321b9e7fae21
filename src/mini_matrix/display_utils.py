"""Display utilities for rendering matrix cells as text."""

import math

CELL_SEPARATOR = ","
ROW_BORDER = "|"
LINE_SEPARATOR = "\n"


def format_number(value: float) -> str:
    """Format a number the way a JavaScript number prints.

    Examples::

        format_number(1.0)           # -> "1"
        format_number(-0.0)          # -> "0"
        format_number(2.5)           # -> "2.5"
        format_number(float("inf"))  # -> "Infinity"
        format_number(1e-7)          # -> "1e-7"
        format_number(2.0 ** 60)     # -> "1152921504606847000"
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    digits, point = _shortest_digits(abs(value))
    k = len(digits)
    if k <= point <= 21:
        return sign + digits + "0" * (point - k)
    if 0 < point <= 21:
        return sign + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return sign + "0." + "0" * -point + digits
    exponent = point - 1
    exp_sign = "+" if exponent >= 0 else "-"
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{sign}{mantissa}e{exp_sign}{abs(exponent)}"


def _shortest_digits(value: float) -> tuple[str, int]:
    """Shortest round-trip digits of a positive float and the decimal point position.

    ``value == 0.<digits> * 10**point``.
    """
    mantissa, _, exp = repr(value).partition("e")
    int_part, _, frac_part = mantissa.partition(".")
    raw = int_part + frac_part
    point = len(int_part) + (int(exp) if exp else 0)
    stripped = raw.lstrip("0")
    point -= len(raw) - len(stripped)
    return stripped.rstrip("0"), point


def format_row(values) -> str:
    """Render one row of values as ``|v0,v1,...|``."""
    cells = CELL_SEPARATOR.join(format_number(v) for v in values)
    return f"{ROW_BORDER}{cells}{ROW_BORDER}"


def format_grid(rows) -> str:
    """Render an iterable of rows, one ``|...|`` line per row."""
    return LINE_SEPARATOR.join(format_row(row) for row in rows)
