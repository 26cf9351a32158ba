"""Significance classification: star notation and fading decisions."""

from __future__ import annotations

import math

# (threshold, stars), most significant first
STAR_LEVELS = (
    (0.001, "***"),
    (0.01, "**"),
    (0.05, "*"),
)

FADE_ALPHA = 0.05


def stars(p: float) -> str:
    """``p < .001`` → ``***``, ``p < .01`` → ``**``, ``p < .05`` → ``*``, else ``""``."""
    if p is None or math.isnan(p):
        return ""
    for threshold, mark in STAR_LEVELS:
        if p < threshold:
            return mark
    return ""


def is_faded(p: float, fade_enabled: bool) -> bool:
    """True when fading is on and *p* is not significant at the 0.05 level."""
    if not fade_enabled or p is None or math.isnan(p):
        return False
    return p >= FADE_ALPHA
