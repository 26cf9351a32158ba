"""Tests for the ``corrtab`` command line."""

from __future__ import annotations

import json

import numpy as np
import pandas as pd
import pytest

from corrtab.cli import build_parser, main, options_from_args


@pytest.fixture
def csv_path(tmp_path, observations):
    path = tmp_path / "data.csv"
    observations.to_csv(path, index=False)
    return path


class TestMain:
    def test_full_document(self, csv_path, capsys) -> None:
        assert main([str(csv_path)]) == 0
        out = capsys.readouterr().out
        assert out.startswith("<html>")
        assert "<th class=\"thead\">alpha</th>" in out

    def test_inline(self, csv_path, capsys) -> None:
        assert main([str(csv_path), "--inline", "--triangle", "lower"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("<table style=")
        assert "class=" not in out
        assert "p-adjustment." in out

    def test_matrix_input(self, tmp_path, matrix4, capsys) -> None:
        path = tmp_path / "matrix.csv"
        names = ["w", "x", "y", "z"]
        pd.DataFrame(matrix4, index=names, columns=names).to_csv(path)
        assert main([str(path), "--matrix", "--val-rm", "0.3"]) == 0
        out = capsys.readouterr().out
        assert '<td class="firsttablecol">w</td>' in out
        assert "valueremove\">0.250<" in out
        assert 'class="pval"' not in out

    def test_config_file(self, csv_path, tmp_path, capsys) -> None:
        config = tmp_path / "options.json"
        config.write_text(json.dumps({"p_numeric": True, "digits": 2, "title": "From file"}))
        assert main([str(csv_path), "--config", str(config), "--digits", "4"]) == 0
        out = capsys.readouterr().out
        assert "<caption>From file</caption>" in out
        assert "(&lt;0.001)" in out

    def test_bad_config(self, csv_path, tmp_path) -> None:
        config = tmp_path / "options.json"
        config.write_text("[1, 2]")
        assert main([str(csv_path), "--config", str(config)]) == 2

    def test_missing_file(self, tmp_path) -> None:
        assert main([str(tmp_path / "nope.csv")]) == 2

    def test_unknown_method_rejected_by_parser(self, csv_path) -> None:
        with pytest.raises(SystemExit):
            main([str(csv_path), "--method", "cosine"])


class TestOptionsFromArgs:
    def test_flags(self, csv_path) -> None:
        args = build_parser().parse_args([
            str(csv_path), "--method", "kendall", "--no-p", "--no-fade", "--keep-spaces",
        ])
        opts = options_from_args(args)
        assert opts.corr_method == "kendall"
        assert not opts.show_p
        assert not opts.fade_ns
        assert not opts.remove_spaces

    def test_flags_override_config(self, csv_path, tmp_path) -> None:
        config = tmp_path / "options.json"
        config.write_text(json.dumps({"triangle": "upper", "digits": 2}))
        args = build_parser().parse_args([str(csv_path), "--config", str(config),
                                          "--triangle", "lower"])
        opts = options_from_args(args)
        assert opts.triangle == "lower"
        assert opts.digits == 2
