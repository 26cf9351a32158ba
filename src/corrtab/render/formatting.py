"""
Value and p-value formatting for correlation tables.

Functions
---------
format_value
    Fixed-decimal correlation coefficient, optional leading-zero strip.
format_p
    Stars or numeric p-value text.
wrap_lines, wrap_label
    Word-wrap a variable label (as lines, or joined by a line-break marker).
"""

from __future__ import annotations

import math
import re
import textwrap

from .significance import stars

# a lone integer-part zero right before the decimal point, after an optional sign
_LEADING_ZERO = re.compile(r"^([+-]?)0(?=\.)")


def format_value(x: float, digits: int = 3, strip_leading_zero: bool = False) -> str:
    """Format a correlation coefficient to ``digits`` decimal places.

    Parameters
    ----------
    x : float
        Coefficient, normally in [-1, 1].
    digits : int
        Number of decimals.
    strip_leading_zero : bool
        Drop the integer-part ``0`` (``.250`` instead of ``0.250``).
    """
    x = float(x)
    if math.isnan(x):
        return "NA"
    text = f"{x:.{digits}f}"
    if strip_leading_zero:
        text = _LEADING_ZERO.sub(r"\1", text, count=1)
    return text


def format_p(
        p: float,
        digits: int = 3,
        numeric: bool = False,
        strip_leading_zero: bool = False,
) -> str:
    """Format a p-value as stars or as a number.

    Parameters
    ----------
    p : float
        The p-value.
    digits : int
        Decimals in numeric mode.
    numeric : bool
        ``False`` gives star notation (``"**"``); ``True`` gives
        ``"<0.001"`` for very small values (also when rounding to *digits*
        would print zero), else fixed decimals.
    strip_leading_zero : bool
        Numeric mode only: ``"<.001"`` / ``".032"``.
    """
    if not numeric:
        return stars(p)
    if math.isnan(p):
        return "NA"
    if p < 0.001 or round(p, digits) < 0.001:
        text = "<0.001"
        return text.replace("<0.", "<.", 1) if strip_leading_zero else text
    return format_value(p, digits, strip_leading_zero)


def wrap_lines(text: str, width: int = 40) -> list:
    """Split *text* into lines of at most *width* characters.

    Words longer than *width* are kept whole.
    """
    lines = textwrap.wrap(
        str(text), width=width, break_long_words=False, break_on_hyphens=False,
    )
    return lines or [str(text)]


def wrap_label(text: str, width: int = 40, sep: str = "<br>") -> str:
    """Wrap *text* at *width* characters, joining the lines with *sep*."""
    return sep.join(wrap_lines(text, width))
