"""
corrtab - Correlation Tables
============================

Render correlation matrices, with significance stars or p-values, as
styled HTML tables: a standalone page with a style sheet, and an
inline-style variant for notebooks and documentation renderers.

Subpackages:
------------
- render: cell decisions, style sheet and HTML emitters
- analysis: correlation tests on raw observations
- core: options and exceptions
- utils: logging
"""

from .analysis import CorrelationTest, corr_test
from .api import CorrTable, render, tab_corr
from .core import CorrtabError, InvalidArgumentError, RenderOptions
from .render import StyleSheet

__version__ = "0.1.0"

__all__ = [
    "tab_corr",
    "render",
    "CorrTable",
    "RenderOptions",
    "StyleSheet",
    "corr_test",
    "CorrelationTest",
    "CorrtabError",
    "InvalidArgumentError",
]
