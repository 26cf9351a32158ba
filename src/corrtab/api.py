"""
Render entry points.

``tab_corr`` takes a precomputed correlation matrix, a ``CorrelationTest``
or raw observations and returns a ``CorrTable`` holding the style block,
the class-based table, the complete page and the inline-style table.

Example
-------
>>> from corrtab import tab_corr
>>> out = tab_corr(df, corr_method="spearman", triangle="lower", val_rm=0.3)
>>> out.full_document        # standalone HTML page
>>> out.inline_document      # embeddable table, no style sheet needed
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence

import numpy as np
import pandas as pd

from .analysis.correlation import CorrelationTest, corr_test
from .core.exceptions import InvalidArgumentError
from .core.options import RenderOptions
from .render.cells import PValues
from .render.inline import compact, project
from .render.styles import StyleSheet
from .render.table import HtmlEmitter, build_table, render_document, resolve_labels
from .utils.logging import get_logger

logger = get_logger("corrtab.api")


@dataclass
class CorrTable:
    """Everything a render produces.

    Parameters
    ----------
    style_block : str
        The ``<style>`` element of the page.
    body : str
        The ``<table>`` with class references.
    full_document : str
        Complete HTML page (head, style block, table).
    inline_document : str
        The table with inline styles, for embedding.
    header : str
        Start of the page, up to the style block.
    metadata : dict
        Resolved selectors, labels and whether p-values were available.
    """

    style_block: str
    body: str
    full_document: str
    inline_document: str
    header: str
    metadata: dict = field(default_factory=dict)

    def _repr_html_(self) -> str:
        return self.inline_document


# ═══════════════════════════════════════════════════════════════════════════
#  Input resolution
# ═══════════════════════════════════════════════════════════════════════════

def _square_matrix(data) -> np.ndarray:
    try:
        matrix = np.asarray(data, dtype=np.float64)
    except (TypeError, ValueError):
        raise InvalidArgumentError(
            "argument 'data' must be a numeric correlation matrix, a CorrelationTest "
            "or a pandas.DataFrame of observations."
        ) from None
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise InvalidArgumentError(
            f"argument 'data' must be a square correlation matrix, got shape {matrix.shape}."
        )
    return matrix


def _resolve_input(data, options: RenderOptions):
    """Return ``(matrix, raw_p or None, fallback labels, options)``."""
    if isinstance(data, pd.DataFrame):
        data = corr_test(
            data,
            method=options.corr_method,
            na_deletion=options.na_deletion,
            adjust=options.adjust_p,
        )
    if isinstance(data, CorrelationTest):
        options = options.replace(
            corr_method=data.method,
            na_deletion=data.na_deletion,
            adjust_p=data.adjust,
        )
        return _square_matrix(data.r), np.asarray(data.p_table), data.labels, options
    return _square_matrix(data), None, None, options


# ═══════════════════════════════════════════════════════════════════════════
#  Rendering
# ═══════════════════════════════════════════════════════════════════════════

def render(data, options: Optional[RenderOptions] = None) -> CorrTable:
    """Render *data* into a ``CorrTable``.

    Parameters
    ----------
    data : array-like, CorrelationTest or pandas.DataFrame
        An N×N correlation matrix (no p-values), a finished
        ``CorrelationTest``, or observations (rows × variables) that are
        correlated first.
    options : RenderOptions, optional
    """
    options = options or RenderOptions()
    matrix, p_raw, fallback_labels, options = _resolve_input(data, options)
    n = matrix.shape[0]

    pvalues = None
    if p_raw is not None:
        pvalues = PValues.from_raw(p_raw, options)
    elif options.show_p or options.fade_ns:
        logger.debug("No p-values available; p-value display and fading are off.")

    if options.string_diag is not None and len(options.string_diag) != n:
        logger.warning(
            f"string_diag has {len(options.string_diag)} entries for {n} variables; "
            f"diagonal cells are left blank."
        )

    labels = resolve_labels(options.var_labels, n, fallback_labels)
    sheet = StyleSheet.default(p_numeric=options.p_numeric).merge(options.css)

    model = build_table(matrix, pvalues, labels, options)
    body = HtmlEmitter(sheet, mode="class").table(model)
    inline_document = project(model, sheet)
    style_block = sheet.render_style_block()
    header, full_document = render_document(body, sheet)

    if options.remove_spaces:
        body = compact(body)
        full_document = compact(full_document)
        inline_document = compact(inline_document)

    logger.info(f"Rendered {n}×{n} correlation table ({options.triangle} triangle).")
    return CorrTable(
        style_block=style_block,
        body=body,
        full_document=full_document,
        inline_document=inline_document,
        header=header,
        metadata={
            "method": options.corr_method,
            "na_deletion": options.na_deletion,
            "adjust_p": options.adjust_p,
            "triangle": options.triangle,
            "n_variables": n,
            "labels": list(labels),
            "has_p_values": pvalues is not None,
        },
    )


def tab_corr(
        data,
        na_deletion: str = "pairwise",
        corr_method: str = "pearson",
        title: Optional[str] = None,
        var_labels: Optional[Sequence[str]] = None,
        wrap_labels: int = 40,
        show_p: bool = True,
        p_numeric: bool = False,
        fade_ns: bool = True,
        val_rm: Optional[float] = None,
        digits: int = 3,
        triangle: str = "both",
        string_diag: Optional[Sequence[str]] = None,
        css: Optional[Mapping[str, str]] = None,
        remove_spaces: bool = True,
        strip_value_zero: bool = False,
        strip_p_zero: bool = False,
        adjust_p: str = "holm",
) -> CorrTable:
    """Summary of correlations as an HTML table.

    See ``RenderOptions`` for the meaning of each argument.  Selectors are
    checked before anything is computed.

    Notes
    -----
    With a precomputed matrix no p-values exist, so ``show_p``,
    ``p_numeric`` and ``fade_ns`` have no effect.
    """
    options = RenderOptions(
        na_deletion=na_deletion,
        corr_method=corr_method,
        title=title,
        var_labels=var_labels,
        wrap_labels=wrap_labels,
        show_p=show_p,
        p_numeric=p_numeric,
        fade_ns=fade_ns,
        val_rm=val_rm,
        digits=digits,
        triangle=triangle,
        string_diag=string_diag,
        css=css,
        remove_spaces=remove_spaces,
        strip_value_zero=strip_value_zero,
        strip_p_zero=strip_p_zero,
        adjust_p=adjust_p,
    )
    return render(data, options)
