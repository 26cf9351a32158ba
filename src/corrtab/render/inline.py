"""Inline-style projection and whitespace compaction of rendered tables."""

from __future__ import annotations

import re

from .styles import StyleSheet
from .table import HtmlEmitter, TableModel

_INDENT_BEFORE_TAG = re.compile(r"^[ \t]+(?=<)", re.MULTILINE)
_TRAILING_SPACE = re.compile(r"[ \t]+$", re.MULTILINE)


def project(model: TableModel, sheet: StyleSheet) -> str:
    """Render *model* with every style tag replaced by its rule text.

    The result has no ``class=`` attributes and needs no style block.
    """
    return HtmlEmitter(sheet, mode="inline").table(model)


def compact(markup: str) -> str:
    """Drop indentation in front of tags and whitespace at line ends."""
    return _TRAILING_SPACE.sub("", _INDENT_BEFORE_TAG.sub("", markup))
