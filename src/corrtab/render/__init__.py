"""
``corrtab.render`` — HTML rendering of correlation matrices.

Modules
-------
formatting   : value / p-value text
significance : star notation and fading
styles       : named CSS rules and their inline projection
cells        : per-cell text and style decisions
table        : table layout and HTML emitters
inline       : inline-style document and whitespace compaction
"""

from .cells import BLANK, CellResult, PValues, decide
from .formatting import format_p, format_value, wrap_label
from .inline import compact, project
from .significance import is_faded, stars
from .styles import DEFAULT_RULES, StyleSheet
from .table import HtmlEmitter, TableModel, build_table, render_document, resolve_labels

__all__ = [
    "BLANK",
    "CellResult",
    "PValues",
    "decide",
    "format_p",
    "format_value",
    "wrap_label",
    "compact",
    "project",
    "is_faded",
    "stars",
    "DEFAULT_RULES",
    "StyleSheet",
    "HtmlEmitter",
    "TableModel",
    "build_table",
    "render_document",
    "resolve_labels",
]
