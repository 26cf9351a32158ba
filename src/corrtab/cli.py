"""
Command-line front end: render a CSV file as a correlation table.

The page (or, with ``--inline``, the inline-style table) is written to
standard output.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .api import render
from .core.exceptions import ConfigurationError, CorrtabError
from .core.options import ADJUST_METHODS, CORR_METHODS, RenderOptions
from .utils.logging import get_logger, set_console_level, setup_file_logging

logger = get_logger("corrtab.cli")


def parse_na_values(text: str):
    items = [x.strip() for x in text.split(",")]
    return [x for x in items if x != ""]


def load_options(path: Path) -> dict:
    """Read a JSON object of ``tab_corr`` keyword arguments."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            values = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f"Cannot read options file {path}: {exc}") from exc
    if not isinstance(values, dict):
        raise ConfigurationError(f"Options file {path} must hold a JSON object.")
    return values


def load_data(path: Path, sep: str = ",", encoding: str = "utf-8",
              na_values_text: str = "NA,N/A,null,NULL,", matrix: bool = False):
    """Observations as a DataFrame, or a precomputed matrix (first column = labels)."""
    df = pd.read_csv(
        path,
        sep=sep,
        encoding=encoding,
        na_values=parse_na_values(na_values_text),
        index_col=0 if matrix else None,
    )
    if matrix:
        return df.to_numpy(dtype=float), [str(c) for c in df.columns]
    return df, None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="corrtab",
        description="Render a correlation table as HTML",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Pearson correlations of every numeric column, full page
  corrtab data.csv > table.html

  # Spearman, lower triangle, numeric p-values, hide |r| < .3
  corrtab data.csv --method spearman --triangle lower --p-numeric --val-rm 0.3

  # Precomputed matrix (first column holds the row labels), inline styles
  corrtab matrix.csv --matrix --inline

  # Options from a JSON file (keys as in tab_corr)
  corrtab data.csv --config options.json
        """
    )

    parser.add_argument('filepath', type=Path, help='CSV file with observations or a matrix')
    parser.add_argument('--matrix', action='store_true',
                        help='Input is a precomputed correlation matrix')
    parser.add_argument('--sep', default=',', help='Field separator (default ",")')
    parser.add_argument('--encoding', default='utf-8', help='Input file encoding')
    parser.add_argument('--na-values', default='NA,N/A,null,NULL,',
                        help='Comma-separated strings read as missing')
    parser.add_argument('--config', type=Path, default=None, help='JSON options file')

    parser.add_argument('--method', choices=CORR_METHODS, default=None, help='Correlation method')
    parser.add_argument('--na-deletion', choices=('pairwise', 'complete'), default=None,
                        help='Missing-data deletion')
    parser.add_argument('--adjust', choices=ADJUST_METHODS, default=None, help='p-value adjustment')
    parser.add_argument('--triangle', choices=('both', 'upper', 'lower'), default=None)
    parser.add_argument('--title', default=None, help='Table caption')
    parser.add_argument('--digits', type=int, default=None, help='Decimal places')
    parser.add_argument('--val-rm', type=float, default=None,
                        help='Hide values with |r| below this threshold')
    parser.add_argument('--p-numeric', action='store_true', help='Print p-values as numbers')
    parser.add_argument('--no-p', action='store_true', help='Do not print p-values')
    parser.add_argument('--no-fade', action='store_true', help='Do not fade non-significant values')
    parser.add_argument('--keep-spaces', action='store_true', help='Keep markup indentation')

    parser.add_argument('--inline', action='store_true', help='Print the inline-style table')
    parser.add_argument('--log-dir', type=Path, default=None, help='Also log to a file here')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    return parser


def options_from_args(args: argparse.Namespace) -> RenderOptions:
    """Options file first, command-line flags on top."""
    values = load_options(args.config) if args.config else {}
    flags = {
        "corr_method": args.method,
        "na_deletion": args.na_deletion,
        "adjust_p": args.adjust,
        "triangle": args.triangle,
        "title": args.title,
        "digits": args.digits,
        "val_rm": args.val_rm,
    }
    values.update({k: v for k, v in flags.items() if v is not None})
    if args.p_numeric:
        values["p_numeric"] = True
    if args.no_p:
        values["show_p"] = False
    if args.no_fade:
        values["fade_ns"] = False
    if args.keep_spaces:
        values["remove_spaces"] = False
    return RenderOptions.from_dict(values)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        set_console_level(logging.DEBUG)
    if args.log_dir:
        setup_file_logging(args.log_dir)

    try:
        options = options_from_args(args)
        data, labels = load_data(
            args.filepath, sep=args.sep, encoding=args.encoding,
            na_values_text=args.na_values, matrix=args.matrix,
        )
        if labels is not None and options.var_labels is None:
            options = options.replace(var_labels=labels)
        result = render(data, options)
    except CorrtabError as exc:
        logger.error(str(exc))
        return 2
    except (OSError, ValueError) as exc:
        logger.error(f"Cannot read {args.filepath}: {exc}")
        return 2

    sys.stdout.write(result.inline_document if args.inline else result.full_document)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
