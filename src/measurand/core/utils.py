"""
measurand.core.utils
====================

Utility functions for normalising unit tokens and rendering magnitudes as text.

`format_magnitude` picks a notation from the size of the value, the same way a
human would write it on a datasheet: plain digits with grouping for everyday
values, general notation just below one, and scientific notation for very
small or very large values.
"""

from __future__ import annotations

import math
import re
import unicodedata
from typing import TYPE_CHECKING, Optional, Pattern

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from measurand.units.context import FormatContext

_TRAILING_ZEROS: Pattern[str] = re.compile(r"\.?0+$")


def normalize_token(text: str) -> str:
    """Trim and NFC-normalise a unit token.

    NFC folds compatibility look-alikes onto their canonical code points, e.g.
    U+2126 OHM SIGN becomes U+03A9 GREEK CAPITAL LETTER OMEGA.
    """
    return unicodedata.normalize("NFC", text.strip())


def _trim_fraction(digits: str) -> str:
    if "." not in digits:
        return digits
    return _TRAILING_ZEROS.sub("", digits)


def _scientific(value: float, digits: int) -> str:
    # 1.5e-04 style: mantissa with at most `digits` fraction digits, signed two-digit exponent
    mantissa, exp = f"{value:.{digits}e}".split("e")
    exponent = int(exp)
    sign = "-" if exponent < 0 else "+"
    return f"{_trim_fraction(mantissa)}e{sign}{abs(exponent):02d}"


def _general(value: float, digits: int) -> str:
    return f"{value:.{max(digits, 1)}g}"


def _grouped(value: float, digits: int) -> str:
    return _trim_fraction(f"{value:,.{digits}f}")


def localize_number(text: str, context: "FormatContext") -> str:
    """Swap the invariant '.' and ',' for the context's separators."""
    if context.decimal_separator == "." and context.group_separator == ",":
        return text
    table = {ord("."): context.decimal_separator, ord(","): context.group_separator}
    return text.translate(table)


def format_magnitude(
    value: float,
    significant_digits_after_radix: int = 2,
    context: Optional["FormatContext"] = None,
) -> str:
    """Render ``value`` for display.

    Parameters
    ----------
    value : float
        The magnitude to render.
    significant_digits_after_radix : int
        Maximum number of digits after the radix point (trailing zeros are
        dropped). In the general-notation band it is the number of significant
        digits instead.
    context : FormatContext, optional
        Supplies the separators. Invariant separators when omitted.

    Examples
    --------
    >>> format_magnitude(1234.5678)
    '1,234.57'
    >>> format_magnitude(0.00012)
    '1.2e-04'
    """
    digits = significant_digits_after_radix
    if digits < 0:
        raise ValueError("significant_digits_after_radix must be >= 0")

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    v = abs(value)
    if v == 0.0:
        text = "0"
    elif v < 1e-3:
        text = _scientific(value, digits)
    elif v < 1.0:
        text = _general(value, digits)
    elif v < 1e6:
        text = _grouped(value, digits)
    else:
        text = _scientific(value, digits)

    if context is None:
        return text
    return localize_number(text, context)


__all__ = ["normalize_token", "format_magnitude", "localize_number"]
