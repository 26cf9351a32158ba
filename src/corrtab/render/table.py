"""
Correlation table rendering.

The table is first laid out as a structured model (``TableModel`` made of
``Row`` and ``Cell`` objects) and only then written out as HTML by an
``HtmlEmitter``.  The emitter has two modes:

``"class"``
    cells reference style rules by name (``class="tdata centeralign"``);
    used for the full page, whose ``<head>`` carries the style block.
``"inline"``
    cells carry the literal rule text (``style="padding:0.2cm; …"``);
    used where external style sheets are not available.

Both outputs come from the same model, so label or cell text can never be
mistaken for a tag name.
"""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..core.options import RenderOptions
from ..utils.logging import get_logger
from .cells import P_BELOW, CellResult, PValues, decide
from .formatting import wrap_lines
from .styles import (
    TAG_CAPTION,
    TAG_FIRSTCOL,
    TAG_PVAL,
    TAG_SUMMARY,
    TAG_TABLE,
    TAG_THEAD,
    StyleSheet,
)

logger = get_logger("corrtab.render.table")

BLANK_HTML = "&nbsp;"

DOCUMENT_HEAD = (
    "<html>\n<head>\n"
    "<meta http-equiv=\"Content-type\" content=\"text/html;charset=UTF-8\">\n"
)

SUMMARY_TEMPLATES = {
    "both": (
        "Computed correlation used {method}-method with {na}-deletion and "
        "{adjust} p-adjustment shown in lower triangle."
    ),
    "lower": (
        "Computed correlation used {method}-method with {na}-deletion and "
        "{adjust} p-adjustment."
    ),
    "upper": (
        "Computed correlation used {method}-method with {na}-deletion and "
        "without p-adjustment."
    ),
}


# ═══════════════════════════════════════════════════════════════════════════
#  Labels
# ═══════════════════════════════════════════════════════════════════════════

def generated_labels(n: int) -> Tuple[str, ...]:
    return tuple(f"var{i + 1}" for i in range(n))


def resolve_labels(
        labels: Optional[Sequence[str]],
        n: int,
        fallback: Optional[Sequence[str]] = None,
) -> Tuple[str, ...]:
    """Pair labels with an n×n matrix.

    *labels* win when they have exactly *n* entries; otherwise *fallback*
    (names carried by the input) is used if it fits, and finally generated
    identifiers ``var1 … varN``.
    """
    if labels is not None:
        if len(labels) == n:
            return tuple(str(label) for label in labels)
        logger.warning(
            f"Got {len(labels)} labels for {n} variables; "
            f"falling back to default names."
        )
    if fallback is not None and len(fallback) == n:
        return tuple(str(name) for name in fallback)
    return generated_labels(n)


def label_html(label: str, width: int) -> str:
    """Escaped label, wrapped at *width* characters with ``<br>``."""
    return "<br>".join(html.escape(line) for line in wrap_lines(label, width))


def summary_text(options: RenderOptions) -> str:
    """Footer message describing how the correlations were computed."""
    template = SUMMARY_TEMPLATES.get(options.triangle, SUMMARY_TEMPLATES["upper"])
    return template.format(
        method=options.corr_method,
        na=options.na_deletion,
        adjust=options.adjust_p,
    )


# ═══════════════════════════════════════════════════════════════════════════
#  Table model
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Cell:
    """One ``<th>``/``<td>`` element; ``content`` is HTML-ready."""

    element: str
    content: str
    tags: Tuple[str, ...]
    colspan: Optional[int] = None
    p_content: Optional[str] = None
    p_layout: Optional[str] = None

    @classmethod
    def from_result(cls, result: CellResult) -> "Cell":
        content = html.escape(result.text) if result.text else BLANK_HTML
        p_content = None if result.p_text is None else html.escape(result.p_text)
        return cls(
            element="td",
            content=content,
            tags=result.tags,
            p_content=p_content,
            p_layout=result.p_layout,
        )


@dataclass(frozen=True)
class Row:
    kind: str
    cells: Tuple[Cell, ...]


@dataclass
class TableModel:
    """Caption plus rows: header, one row per variable, summary."""

    caption: Optional[str]
    rows: List[Row] = field(default_factory=list)


def build_table(
        matrix: np.ndarray,
        pvalues: Optional[PValues],
        labels: Sequence[str],
        options: RenderOptions,
) -> TableModel:
    """Lay out the full table for an n×n *matrix*.

    Parameters
    ----------
    matrix : np.ndarray
        Square correlation matrix.
    pvalues : PValues or None
        Parallel p-value matrices, if any.
    labels : sequence of str
        Exactly n labels (see ``resolve_labels``).
    options : RenderOptions
    """
    n = matrix.shape[0]
    names = [label_html(label, options.wrap_labels) for label in labels]
    caption = html.escape(options.title) if options.title is not None else None
    model = TableModel(caption=caption)

    header = [Cell("th", BLANK_HTML, (TAG_THEAD,))]
    header += [Cell("th", name, (TAG_THEAD,)) for name in names]
    model.rows.append(Row("header", tuple(header)))

    for i in range(n):
        cells = [Cell("td", names[i], (TAG_FIRSTCOL,))]
        for j in range(n):
            cells.append(Cell.from_result(decide(i, j, matrix, pvalues, options)))
        model.rows.append(Row("body", tuple(cells)))

    summary = Cell("td", html.escape(summary_text(options)), (TAG_SUMMARY,), colspan=n + 1)
    model.rows.append(Row("summary", (summary,)))
    return model


# ═══════════════════════════════════════════════════════════════════════════
#  HTML output
# ═══════════════════════════════════════════════════════════════════════════

class HtmlEmitter:
    """Write a ``TableModel`` as HTML.

    Parameters
    ----------
    sheet : StyleSheet
        Rules used for inline styles.
    mode : ``"class"`` | ``"inline"``
    """

    MODES = ("class", "inline")

    def __init__(self, sheet: StyleSheet, mode: str = "class"):
        if mode not in self.MODES:
            raise ValueError(f"Unknown emitter mode '{mode}'. Choose from {list(self.MODES)}.")
        self.mode = mode
        self.rules = sheet.inline_table()

    def attr(self, tags: Sequence[str]) -> str:
        if self.mode == "class":
            return f" class=\"{' '.join(tags)}\""
        style = " ".join(self.rules[t] for t in tags)
        return f" style=\"{html.escape(style)}\""

    def element_attr(self, tag: str) -> str:
        # table and caption are styled by element selector in class mode
        if self.mode == "class":
            return ""
        return self.attr((tag,))

    def cell(self, cell: Cell) -> str:
        span = f" colspan=\"{cell.colspan}\"" if cell.colspan else ""
        content = cell.content
        if cell.p_content is not None:
            p_span = f"<span{self.attr((TAG_PVAL,))}>"
            if cell.p_layout == P_BELOW:
                content += f"<br>{p_span}({cell.p_content})</span>"
            else:
                content += f"{p_span}{cell.p_content}</span>"
        return f"<{cell.element}{span}{self.attr(cell.tags)}>{content}</{cell.element}>"

    def table(self, model: TableModel) -> str:
        out = [f"<table{self.element_attr(TAG_TABLE)}>"]
        if model.caption is not None:
            out.append(f"  <caption{self.element_attr(TAG_CAPTION)}>{model.caption}</caption>")
        for row in model.rows:
            out.append("  <tr>")
            out.extend(f"    {self.cell(c)}" for c in row.cells)
            out.append("  </tr>")
        out.append("</table>")
        return "\n".join(out)


def render_document(body: str, sheet: StyleSheet) -> Tuple[str, str]:
    """Wrap a class-mode table in a page.

    Returns
    -------
    header : str
        Opening of the page up to the style block.
    document : str
        The complete page.
    """
    document = (
        f"{DOCUMENT_HEAD}{sheet.render_style_block()}\n</head>\n<body>\n"
        f"{body}\n</body></html>"
    )
    return DOCUMENT_HEAD, document
