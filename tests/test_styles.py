"""Tests for the style sheet: defaults, overrides and both projections."""

from __future__ import annotations

import pytest

from corrtab.render.styles import DEFAULT_RULES, NUMERIC_P_RULE, StyleSheet


class TestDefaults:
    def test_default_rule_names(self) -> None:
        assert StyleSheet.default().names == (
            "table", "caption", "thead", "tdata", "firsttablecol",
            "centeralign", "notsig", "pval", "summary", "valueremove",
        )

    def test_numeric_p_rule(self) -> None:
        assert StyleSheet.default(p_numeric=True).rule("pval") == NUMERIC_P_RULE
        assert StyleSheet.default().rule("pval") == DEFAULT_RULES["pval"]

    def test_default_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            DEFAULT_RULES["table"] = "border:none;"


class TestMerge:
    def test_append(self) -> None:
        sheet = StyleSheet.default().merge({"table": "+border:red;"})
        assert sheet.rule("table") == DEFAULT_RULES["table"] + "border:red;"

    def test_replace(self) -> None:
        sheet = StyleSheet.default().merge({"table": "border:red;"})
        assert sheet.rule("table") == "border:red;"

    def test_css_prefixed_keys(self) -> None:
        sheet = StyleSheet.default().merge({"css.valueremove": "color:blue;"})
        assert sheet.rule("valueremove") == "color:blue;"

    def test_unknown_key_ignored(self) -> None:
        base = StyleSheet.default()
        assert base.merge({"no-such-rule": "color:red;"}) == base

    def test_merge_leaves_base_sheet_unchanged(self) -> None:
        base = StyleSheet.default()
        base.merge({"tdata": "padding:0;"})
        assert base.rule("tdata") == DEFAULT_RULES["tdata"]

    def test_append_to_numeric_p_default(self) -> None:
        sheet = StyleSheet.default(p_numeric=True).merge({"pval": "+color:red;"})
        assert sheet.rule("pval") == NUMERIC_P_RULE + "color:red;"


class TestOutput:
    def test_style_block(self) -> None:
        block = StyleSheet.default().render_style_block()
        lines = block.splitlines()
        assert lines[0] == "<style>"
        assert lines[-1] == "</style>"
        assert "html, body { background-color: white; }" in lines
        assert f"table {{ {DEFAULT_RULES['table']} }}" in lines
        assert f"caption {{ {DEFAULT_RULES['caption']} }}" in lines
        assert ".tdata { padding:0.2cm; }" in lines
        assert ".valueremove { color:white; }" in lines

    def test_style_block_uses_overrides(self) -> None:
        block = StyleSheet.default().merge({"notsig": "color:#cccccc;"}).render_style_block()
        assert ".notsig { color:#cccccc; }" in block

    def test_inline_table(self) -> None:
        assert StyleSheet.default().inline_table() == dict(DEFAULT_RULES)

    def test_inline_table_is_a_copy(self) -> None:
        sheet = StyleSheet.default()
        sheet.inline_table()["tdata"] = "padding:0;"
        assert sheet.rule("tdata") == DEFAULT_RULES["tdata"]


class TestHashing:
    def test_equal_sheets_hash_equal(self) -> None:
        a = StyleSheet.default().merge({"table": "+border:red;"})
        b = StyleSheet.default().merge({"css.table": "+border:red;"})
        assert a == b
        assert hash(a) == hash(b)

    def test_rule_order_does_not_matter(self) -> None:
        reordered = StyleSheet(dict(reversed(list(DEFAULT_RULES.items()))))
        assert reordered == StyleSheet.default()
        assert hash(reordered) == hash(StyleSheet.default())

    def test_usable_as_set_member_and_key(self) -> None:
        sheets = {StyleSheet.default(), StyleSheet.default(), StyleSheet.default(p_numeric=True)}
        assert len(sheets) == 2
        cache = {StyleSheet.default(): "default"}
        assert cache[StyleSheet()] == "default"
