"""
Per-cell decisions for correlation tables.

``decide`` answers, for one matrix position, *what text goes into the cell*
and *which style tags apply*.  It never produces markup; the emitters in
``corrtab.render.table`` turn a ``CellResult`` into HTML.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from ..core.options import RenderOptions
from .formatting import format_p, format_value
from .significance import is_faded
from .styles import TAG_CENTER, TAG_NOTSIG, TAG_TDATA, TAG_VALUEREMOVE

BASE_TAGS = (TAG_TDATA, TAG_CENTER)

P_INLINE = "inline"
P_BELOW = "below"


@dataclass(frozen=True)
class CellResult:
    """Content and style tags of one body cell.

    ``text`` is plain (unescaped) text; an empty ``text`` is the blank
    placeholder.  ``p_text`` is shown inline (stars) or on its own line in
    parentheses (numeric), as given by ``p_layout``.
    """

    text: str = ""
    tags: Tuple[str, ...] = BASE_TAGS
    p_text: Optional[str] = None
    p_layout: str = P_INLINE

    @property
    def is_blank(self) -> bool:
        return self.text == "" and self.p_text is None


BLANK = CellResult()


@dataclass(frozen=True)
class PValues:
    """Two parallel p-value matrices.

    ``raw`` holds the numbers used for decisions (fading); ``display`` the
    already formatted strings shown in the cells.
    """

    raw: np.ndarray
    display: np.ndarray

    @classmethod
    def from_raw(cls, raw, options: RenderOptions) -> "PValues":
        raw = np.asarray(raw, dtype=np.float64)
        display = np.empty(raw.shape, dtype=object)
        for idx, p in np.ndenumerate(raw):
            display[idx] = format_p(
                p, options.digits, options.p_numeric, options.strip_p_zero,
            )
        return cls(raw=raw, display=display)


def is_visible(i: int, j: int, triangle: str) -> bool:
    """Whether the off-diagonal cell (i, j) shows its value."""
    return (
        triangle == "both"
        or (triangle == "upper" and j > i)
        or (triangle == "lower" and i > j)
    )


def decide(
        i: int,
        j: int,
        matrix: np.ndarray,
        pvalues: Optional[PValues],
        options: RenderOptions,
) -> CellResult:
    """Decide text and style tags of body cell (i, j).

    Parameters
    ----------
    i, j : int
        Row and column index.
    matrix : np.ndarray
        Square correlation matrix.
    pvalues : PValues or None
        ``None`` disables p display and fading.
    options : RenderOptions
    """
    n = matrix.shape[0]

    if i == j:
        diag = options.string_diag
        if diag is not None and len(diag) == n:
            return CellResult(text=diag[i])
        return BLANK

    if not is_visible(i, j, options.triangle):
        return BLANK

    r = matrix[i, j]
    text = format_value(r, options.digits, options.strip_value_zero)
    tags = list(BASE_TAGS)
    p_text = None
    p_layout = P_INLINE

    if pvalues is not None:
        if options.show_p:
            p_text = pvalues.display[i, j]
            p_layout = P_BELOW if options.p_numeric else P_INLINE
        if is_faded(pvalues.raw[i, j], options.fade_ns):
            tags.append(TAG_NOTSIG)

    if options.val_rm is not None and abs(r) < abs(options.val_rm):
        tags.append(TAG_VALUEREMOVE)

    return CellResult(text=text, tags=tuple(tags), p_text=p_text, p_layout=p_layout)
