"""Tests for ``RenderOptions`` and selector matching."""

from __future__ import annotations

import dataclasses

import pytest

from corrtab.core.exceptions import InvalidArgumentError
from corrtab.core.options import CORR_METHODS, RenderOptions, match_arg


class TestMatchArg:
    def test_exact(self) -> None:
        assert match_arg("kendall", "corr_method", CORR_METHODS) == "kendall"

    def test_prefix(self) -> None:
        assert match_arg("k", "corr_method", CORR_METHODS) == "kendall"

    def test_message_lists_choices(self) -> None:
        with pytest.raises(InvalidArgumentError, match="pearson, spearman, kendall"):
            match_arg("cosine", "corr_method", CORR_METHODS)

    def test_not_a_string(self) -> None:
        with pytest.raises(InvalidArgumentError):
            match_arg(None, "corr_method", CORR_METHODS)

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            match_arg("x", "corr_method", CORR_METHODS)


class TestRenderOptions:
    def test_defaults(self) -> None:
        opts = RenderOptions()
        assert opts.na_deletion == "pairwise"
        assert opts.corr_method == "pearson"
        assert opts.adjust_p == "holm"
        assert opts.triangle == "both"
        assert opts.digits == 3
        assert opts.wrap_labels == 40
        assert opts.show_p and opts.fade_ns and opts.remove_spaces
        assert not (opts.p_numeric or opts.strip_value_zero or opts.strip_p_zero)
        assert opts.val_rm is None and opts.string_diag is None

    def test_listwise_is_complete(self) -> None:
        assert RenderOptions(na_deletion="listwise").na_deletion == "complete"

    @pytest.mark.parametrize("given, expected", [
        ("u", "upper"), ("upper", "upper"), ("l", "lower"), ("lower", "lower"),
        ("both", "both"), (None, "both"), ("diagonal", "both"),
    ])
    def test_triangle(self, given, expected) -> None:
        assert RenderOptions(triangle=given).triangle == expected

    @pytest.mark.parametrize("kwargs", [
        {"digits": -1}, {"digits": 2.5}, {"wrap_labels": 0}, {"val_rm": "high"},
    ])
    def test_invalid_values(self, kwargs) -> None:
        with pytest.raises(InvalidArgumentError):
            RenderOptions(**kwargs)

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            RenderOptions().digits = 2

    def test_sequences_copied(self) -> None:
        labels = ["a", "b"]
        opts = RenderOptions(var_labels=labels, css={"table": "x"})
        labels.append("c")
        assert opts.var_labels == ("a", "b")
        with pytest.raises(TypeError):
            opts.css["table"] = "y"

    def test_from_dict_ignores_unknown(self) -> None:
        opts = RenderOptions.from_dict({"digits": 2, "colour": "red"})
        assert opts.digits == 2

    def test_replace_revalidates(self) -> None:
        opts = RenderOptions().replace(corr_method="spear")
        assert opts.corr_method == "spearman"
        with pytest.raises(InvalidArgumentError):
            RenderOptions().replace(adjust_p="nope")
