"""
Render options for corrtab.

``RenderOptions`` is built once per render call and is immutable for the
rest of the call.  All selector arguments are resolved in ``__post_init__``
so that an invalid method, deletion or adjustment name fails before any
statistics or formatting run.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

from .exceptions import InvalidArgumentError
from ..utils.logging import get_logger

logger = get_logger("corrtab.core.options")

# ═══════════════════════════════════════════════════════════════════════════
#  Accepted selector values
# ═══════════════════════════════════════════════════════════════════════════

CORR_METHODS = ("pearson", "spearman", "kendall")
NA_DELETIONS = ("pairwise", "complete", "listwise")
ADJUST_METHODS = ("holm", "hochberg", "hommel", "bonferroni", "BH", "BY", "fdr", "none")
TRIANGLES = ("both", "upper", "lower")


def match_arg(value: str, arg_name: str, choices: Sequence[str]) -> str:
    """Resolve *value* against *choices*, accepting a unique prefix.

    Parameters
    ----------
    value : str
        The requested selector, e.g. ``"spear"``.
    arg_name : str
        Argument name used in the error message.
    choices : sequence of str
        Accepted values.

    Raises
    ------
    InvalidArgumentError
        If *value* is not a string, matches nothing, or is an ambiguous
        prefix.
    """
    if not isinstance(value, str) or not value:
        raise InvalidArgumentError(
            f"argument '{arg_name}' must be one of: {', '.join(choices)} "
            f"(got {value!r})"
        )
    if value in choices:
        return value
    hits = [c for c in choices if c.startswith(value)]
    if len(hits) == 1:
        return hits[0]
    if hits:
        raise InvalidArgumentError(
            f"argument '{arg_name}' value {value!r} is ambiguous, "
            f"it matches: {', '.join(hits)}"
        )
    raise InvalidArgumentError(
        f"argument '{arg_name}' must be one of: {', '.join(choices)} "
        f"(got {value!r})"
    )


def normalize_triangle(triangle: Optional[str]) -> str:
    """Map ``u``/``upper`` and ``l``/``lower``; anything else means ``both``."""
    if triangle in ("u", "upper"):
        return "upper"
    if triangle in ("l", "lower"):
        return "lower"
    if triangle not in (None, "both"):
        logger.warning(f"Unknown triangle {triangle!r}, rendering both triangles.")
    return "both"


# ═══════════════════════════════════════════════════════════════════════════
#  RenderOptions
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class RenderOptions:
    """Every knob of a correlation-table render.

    Parameters
    ----------
    na_deletion : ``"pairwise"`` | ``"complete"``
        Missing-data strategy for raw observations (``"listwise"`` is an
        alias of ``"complete"``).
    corr_method : ``"pearson"`` | ``"spearman"`` | ``"kendall"``
    title : str, optional
        Table caption.
    var_labels : sequence of str, optional
        One label per variable; falls back to the input's names.
    wrap_labels : int
        Labels longer than this many characters are wrapped.
    show_p : bool
        Append p-values (stars or numbers) to each visible cell.
    p_numeric : bool
        Print p-values as numbers instead of stars.
    fade_ns : bool
        Grey out values whose p-value is 0.05 or more.
    val_rm : float, optional
        Values with ``|r| < |val_rm|`` are restyled as invisible.
    digits : int
        Decimal places for values and numeric p-values.
    triangle : ``"both"`` | ``"upper"`` | ``"lower"``
        ``"u"`` and ``"l"`` are accepted too.
    string_diag : sequence of str, optional
        Text of the diagonal cells; used only if it has one entry per
        variable.
    css : mapping, optional
        Style-rule overrides, ``{"table": "+border:red;"}``.
    remove_spaces : bool
        Strip indentation whitespace from the generated markup.
    strip_value_zero, strip_p_zero : bool
        Strip the leading zero of values / p-values (``.250``).
    adjust_p : str
        Multiple-comparison adjustment applied to the p-values.
    """

    na_deletion: str = "pairwise"
    corr_method: str = "pearson"
    title: Optional[str] = None
    var_labels: Optional[Sequence[str]] = None
    wrap_labels: int = 40
    show_p: bool = True
    p_numeric: bool = False
    fade_ns: bool = True
    val_rm: Optional[float] = None
    digits: int = 3
    triangle: str = "both"
    string_diag: Optional[Sequence[str]] = None
    css: Optional[Mapping[str, str]] = None
    remove_spaces: bool = True
    strip_value_zero: bool = False
    strip_p_zero: bool = False
    adjust_p: str = "holm"

    def __post_init__(self):
        def set_(name, value):
            object.__setattr__(self, name, value)

        na = match_arg(self.na_deletion, "na_deletion", NA_DELETIONS)
        set_("na_deletion", "complete" if na == "listwise" else na)
        set_("corr_method", match_arg(self.corr_method, "corr_method", CORR_METHODS))
        set_("adjust_p", match_arg(self.adjust_p, "adjust_p", ADJUST_METHODS))
        set_("triangle", normalize_triangle(self.triangle))

        if isinstance(self.digits, bool) or not isinstance(self.digits, int) or self.digits < 0:
            raise InvalidArgumentError(
                f"argument 'digits' must be a non-negative integer (got {self.digits!r})"
            )
        if isinstance(self.wrap_labels, bool) or not isinstance(self.wrap_labels, int) \
                or self.wrap_labels < 1:
            raise InvalidArgumentError(
                f"argument 'wrap_labels' must be a positive integer (got {self.wrap_labels!r})"
            )
        if self.val_rm is not None:
            try:
                set_("val_rm", float(self.val_rm))
            except (TypeError, ValueError):
                raise InvalidArgumentError(
                    f"argument 'val_rm' must be a number between 0 and 1 (got {self.val_rm!r})"
                ) from None

        if self.var_labels is not None:
            set_("var_labels", tuple(str(v) for v in self.var_labels))
        if self.string_diag is not None:
            set_("string_diag", tuple(str(v) for v in self.string_diag))
        if self.css is not None:
            set_("css", MappingProxyType(dict(self.css)))

    @classmethod
    def from_dict(cls, values: Mapping) -> "RenderOptions":
        """Build options from a plain mapping (e.g. a parsed JSON file).

        Unknown keys are dropped with a warning.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            logger.warning(f"Ignoring unknown option(s): {', '.join(unknown)}")
        return cls(**{k: v for k, v in values.items() if k in known})

    def replace(self, **changes) -> "RenderOptions":
        """Copy with some fields changed (re-validated)."""
        current = {f.name: getattr(self, f.name) for f in fields(self)}
        current.update(changes)
        return type(self)(**current)
