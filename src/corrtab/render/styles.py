"""
Style sheet for correlation tables.

A ``StyleSheet`` holds one CSS rule per tag name.  It is the single source
of truth for both outputs: the ``<style>`` block of the class-based page and
the literal ``style="…"`` attributes of the inline page.

Example
-------
>>> sheet = StyleSheet.default().merge({"table": "+border:red;"})
>>> sheet.rule("table")
'border-collapse:collapse; border:none;border:red;'
>>> sheet.inline_table()["tdata"]
'padding:0.2cm;'
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from ..utils.logging import get_logger

logger = get_logger("corrtab.render.styles")

# ═══════════════════════════════════════════════════════════════════════════
#  Tag names and default rules
# ═══════════════════════════════════════════════════════════════════════════

TAG_TABLE = "table"
TAG_CAPTION = "caption"
TAG_THEAD = "thead"
TAG_TDATA = "tdata"
TAG_FIRSTCOL = "firsttablecol"
TAG_CENTER = "centeralign"
TAG_SUMMARY = "summary"
TAG_NOTSIG = "notsig"
TAG_PVAL = "pval"
TAG_VALUEREMOVE = "valueremove"

# rendered as element selectors; every other tag is a class
ELEMENT_TAGS = (TAG_TABLE, TAG_CAPTION)

DEFAULT_RULES = MappingProxyType({
    TAG_TABLE: "border-collapse:collapse; border:none;",
    TAG_CAPTION: "font-weight: bold; text-align:left;",
    TAG_THEAD: (
        "font-style:italic; font-weight:normal; border-top:double black; "
        "border-bottom:1px solid black; padding:0.2cm;"
    ),
    TAG_TDATA: "padding:0.2cm;",
    TAG_FIRSTCOL: "font-style:italic;",
    TAG_CENTER: "text-align:center;",
    TAG_NOTSIG: "color:#999999;",
    TAG_PVAL: "vertical-align:super;font-size:0.8em;",
    TAG_SUMMARY: (
        "border-bottom:double black; border-top:1px solid black; "
        "font-style:italic; font-size:0.9em; text-align:right;"
    ),
    TAG_VALUEREMOVE: "color:white;",
})

# numeric p-values sit on their own line and are not superscripted
NUMERIC_P_RULE = "font-style:italic;"

PAGE_BACKGROUND = "html, body { background-color: white; }"


def _override_key(key: str) -> str:
    """``"css.table"`` and ``"table"`` address the same rule."""
    return key[4:] if key.startswith("css.") else key


# ═══════════════════════════════════════════════════════════════════════════
#  StyleSheet
# ═══════════════════════════════════════════════════════════════════════════

class StyleSheet:
    """Immutable set of named CSS rules.

    Parameters
    ----------
    rules : mapping of str to str
        Tag name → CSS declarations.  Defaults to ``DEFAULT_RULES``.
    """

    def __init__(self, rules: Optional[Mapping[str, str]] = None):
        self._rules = MappingProxyType(dict(DEFAULT_RULES if rules is None else rules))

    @classmethod
    def default(cls, p_numeric: bool = False) -> "StyleSheet":
        """Default sheet; numeric p-values get an italic, non-superscript rule."""
        rules = dict(DEFAULT_RULES)
        if p_numeric:
            rules[TAG_PVAL] = NUMERIC_P_RULE
        return cls(rules)

    # ── merging ────────────────────────────────────────────────────────

    def merge(self, overrides: Optional[Mapping[str, str]]) -> "StyleSheet":
        """Return a new sheet with *overrides* applied.

        A value starting with ``+`` is appended to the current rule, any
        other value replaces it.  Unknown names are ignored.
        """
        if not overrides:
            return self
        rules = dict(self._rules)
        for key, value in overrides.items():
            name = _override_key(str(key))
            if name not in rules:
                logger.debug(f"Ignoring style override for unknown rule '{key}'.")
                continue
            if value is None:
                continue
            value = str(value)
            if value.startswith("+"):
                rules[name] = rules[name] + value[1:]
            else:
                rules[name] = value
        return type(self)(rules)

    # ── lookups ────────────────────────────────────────────────────────

    @property
    def names(self) -> tuple:
        return tuple(self._rules)

    def rule(self, name: str) -> str:
        return self._rules[name]

    def inline_table(self) -> dict:
        """Tag name → rule text, for inline projection."""
        return dict(self._rules)

    # ── output ─────────────────────────────────────────────────────────

    def render_style_block(self) -> str:
        """The page ``<style>`` element, one declaration per rule."""
        lines = ["<style>", PAGE_BACKGROUND]
        for name, css in self._rules.items():
            selector = name if name in ELEMENT_TAGS else f".{name}"
            lines.append(f"{selector} {{ {css} }}")
        lines.append("</style>")
        return "\n".join(lines)

    def __eq__(self, other):
        if not isinstance(other, StyleSheet):
            return NotImplemented
        return dict(self._rules) == dict(other._rules)

    def __hash__(self):
        return hash(frozenset(self._rules.items()))

    def __repr__(self) -> str:
        return f"StyleSheet({', '.join(self._rules)})"
