import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

_NON_NUMERIC = re.compile(r"[^0-9.\-]")
_LEADING_NUMBER = re.compile(r"-?\d*(?:\.\d*)?")


def sanitize_numeric_text(text: str | None) -> str:
    """Strip everything but digits, then keep the leading ``-?digits[.digits]`` run.

    Text stops at the first character that breaks the pattern, so a second
    decimal point or an inner minus sign ends the number instead of being
    spliced out: "$1,200.50" -> "1200.50", "1.2.3" -> "1.2", "5-3" -> "5",
    "--5" -> "", "" -> "".
    """
    if not text:
        return ""
    kept = _NON_NUMERIC.sub("", str(text))
    number = _LEADING_NUMBER.match(kept).group()
    return number if any(c.isdigit() for c in number) else ""


def parse_number(text: str | None) -> float:
    """Parse counter text to a float; empty, unparseable or non-finite text is 0."""
    if not text:
        return 0.0
    try:
        value = float(text)
    except ValueError:
        return 0.0
    return value if math.isfinite(value) else 0.0


def format_fixed(value: float, decimals: int = 2) -> str:
    # Half away from zero on the exact binary value; never "-0.00".
    if not math.isfinite(value) or value == 0:
        value = 0.0
    quantum = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        # Wide enough for the integer part of any finite float.
        ctx.prec = 320 + decimals
        rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    if rounded == 0:
        rounded = abs(rounded)
    return f"{rounded:.{decimals}f}"


def format_raw(value: float) -> str:
    """Number-to-text as a browser prints it: "12000", "1200.5", "0.00001", "1e-7", "1e+21"."""
    if value == 0:
        return "0"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(text), "f")
    mantissa, _, exponent = text.partition("e")
    return f"{mantissa}e{int(exponent):+d}"
