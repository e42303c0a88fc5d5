"""Formatting helpers for statement figures."""
from numbers import Real


def fmt_amount(value: Real) -> str:
    """
    Render a charge the way the number prints natively.
    Integer charges have no decimal point ('402'); float charges keep theirs,
    so a whole float still shows one decimal digit ('14.0').
    Amounts are never padded or rounded to a fixed number of places.
    """
    s = str(value)
    if isinstance(value, float) and "e" in s:
        # whole mantissa in exponent form: '3e+16' -> '3.0e+16'
        mantissa, exp = s.split("e", 1)
        if "." not in mantissa:
            s = f"{mantissa}.0e{exp}"
    return s
