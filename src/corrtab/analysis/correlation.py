"""
Correlation tests on raw observations.

This module is the statistics collaborator of corrtab: given per-row
observations it returns the correlation matrix, the per-pair sample sizes
and two-tailed p-values, adjusted for multiple comparisons.

Layout of the p-value matrix
----------------------------
The adjusted p-values fill the **upper** triangle of ``CorrelationTest.p``
and the unadjusted ones the lower triangle.  ``CorrelationTest.p_table`` is
the transpose, which puts the adjusted values below the diagonal; that is
the matrix shown in rendered tables (hence "p-adjustment shown in lower
triangle" in the table footer).

Example
-------
>>> from corrtab.analysis import corr_test
>>> res = corr_test(df, method="spearman", adjust="BH")
>>> res.r            # N×N correlation matrix
>>> res.p            # adjusted above, raw below the diagonal
>>> res.to_dataframe()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
import pandas as pd
from scipy import stats
from statsmodels.stats.multitest import multipletests

from ..core.exceptions import DataIntegrityError, InvalidArgumentError
from ..core.options import ADJUST_METHODS, CORR_METHODS, NA_DELETIONS, match_arg
from ..utils.logging import get_logger

logger = get_logger("corrtab.analysis.correlation")

# adjustment name → statsmodels.multipletests method
_MULTIPLETESTS_METHODS = {
    "holm": "holm",
    "hochberg": "simes-hochberg",
    "hommel": "hommel",
    "bonferroni": "bonferroni",
    "BH": "fdr_bh",
    "fdr": "fdr_bh",
    "BY": "fdr_by",
}


# ═══════════════════════════════════════════════════════════════════════════
#  Input validation
# ═══════════════════════════════════════════════════════════════════════════

def _as_frame(data) -> pd.DataFrame:
    """Coerce observations into a float DataFrame of numeric columns.

    Rows are observations, columns are variables.
    """
    if isinstance(data, pd.DataFrame):
        df = data
    else:
        arr = np.asarray(data)
        if arr.ndim != 2:
            raise InvalidArgumentError(
                f"observations must be 2-D (rows × variables), got ndim={arr.ndim}."
            )
        df = pd.DataFrame(arr, columns=[f"var{i + 1}" for i in range(arr.shape[1])])

    numeric = df.select_dtypes(include="number").select_dtypes(exclude="bool")
    dropped = [c for c in df.columns if c not in numeric.columns]
    if dropped:
        logger.warning(f"Skipping non-numeric column(s): {', '.join(map(str, dropped))}")
    if numeric.shape[1] < 2:
        raise DataIntegrityError(
            f"Correlation needs at least 2 numeric variables, got {numeric.shape[1]}."
        )
    return numeric.astype(np.float64)


# ═══════════════════════════════════════════════════════════════════════════
#  Computation helpers
# ═══════════════════════════════════════════════════════════════════════════

def _pair_counts(df: pd.DataFrame) -> np.ndarray:
    """Number of rows where both variables of each pair are present."""
    present = df.notna().to_numpy(dtype=np.float64)
    return present.T @ present


def _t_test_p(r: np.ndarray, n: np.ndarray) -> np.ndarray:
    r"""Two-tailed p-value of each coefficient.

    .. math::

        t = r \sqrt{\frac{n - 2}{1 - r^2}}, \qquad p = 2\,P(T_{n-2} > |t|)
    """
    dof = n - 2.0
    with np.errstate(divide="ignore", invalid="ignore"):
        r = np.clip(r, -1.0, 1.0)
        t = r * np.sqrt(dof) / np.sqrt(1.0 - r ** 2)
        p = 2.0 * stats.t.sf(np.abs(t), dof)
    p[dof <= 0] = np.nan
    return p


def _adjust(p: np.ndarray, adjust: str) -> np.ndarray:
    """Adjust the upper-triangle tests; the lower triangle stays raw."""
    out = p.copy()
    if adjust == "none":
        return out
    iu = np.triu_indices_from(p, k=1)
    upper = p[iu]
    ok = ~np.isnan(upper)
    if ok.any():
        _, corrected, _, _ = multipletests(upper[ok], method=_MULTIPLETESTS_METHODS[adjust])
        upper = upper.copy()
        upper[ok] = corrected
    out[iu] = upper
    return out


# ═══════════════════════════════════════════════════════════════════════════
#  Result
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class CorrelationTest:
    """Container returned by ``corr_test``.

    Parameters
    ----------
    r : np.ndarray
        N×N correlation matrix.
    p : np.ndarray
        N×N p-values, adjusted above the diagonal, raw below it.
    n : np.ndarray
        N×N pairwise sample sizes.
    method, na_deletion, adjust : str
        The resolved selectors.
    labels : sequence of str
        Variable names, in matrix order.
    """

    r: np.ndarray
    p: np.ndarray
    n: np.ndarray
    method: str
    na_deletion: str
    adjust: str
    labels: Optional[Sequence[str]] = None

    @property
    def p_table(self) -> np.ndarray:
        """p-values as laid out in a table: adjusted values below the diagonal."""
        return self.p.T

    @property
    def shape(self) -> tuple:
        return self.r.shape

    def to_dataframe(self) -> pd.DataFrame:
        """Long format: one row per variable pair (upper triangle)."""
        names = list(self.labels) if self.labels is not None else \
            [f"var{i + 1}" for i in range(self.r.shape[0])]
        iu = np.triu_indices_from(self.r, k=1)
        return pd.DataFrame({
            "var1": [names[i] for i in iu[0]],
            "var2": [names[j] for j in iu[1]],
            self.method: self.r[iu],
            "n": self.n[iu].astype(int),
            "p_value": self.p.T[iu],
            "p_adjusted": self.p[iu],
        })

    def __repr__(self) -> str:
        return (
            f"CorrelationTest(method='{self.method}', na_deletion='{self.na_deletion}', "
            f"adjust='{self.adjust}', shape={self.r.shape})"
        )


def corr_test(
        data,
        method: str = "pearson",
        na_deletion: str = "pairwise",
        adjust: str = "holm",
) -> CorrelationTest:
    """Correlate every pair of numeric variables in *data*.

    Parameters
    ----------
    data : pandas.DataFrame or array-like, shape (T, N)
        Observations; non-numeric columns are skipped.
    method : ``"pearson"`` | ``"spearman"`` | ``"kendall"``
    na_deletion : ``"pairwise"`` | ``"complete"``
        ``"complete"`` (alias ``"listwise"``) drops every row with a
        missing value first.
    adjust : str
        One of ``holm, hochberg, hommel, bonferroni, BH, BY, fdr, none``.

    Raises
    ------
    InvalidArgumentError
        Unknown selector.
    DataIntegrityError
        Fewer than two numeric variables.
    """
    method = match_arg(method, "corr_method", CORR_METHODS)
    na_deletion = match_arg(na_deletion, "na_deletion", NA_DELETIONS)
    if na_deletion == "listwise":
        na_deletion = "complete"
    adjust = match_arg(adjust, "adjust_p", ADJUST_METHODS)

    df = _as_frame(data)
    if na_deletion == "complete":
        before = len(df)
        df = df.dropna()
        if len(df) < before:
            logger.debug(f"Complete-case deletion dropped {before - len(df)} row(s).")

    r = df.corr(method=method).to_numpy(dtype=np.float64)
    n = _pair_counts(df)
    p = _adjust(_t_test_p(r, n), adjust)

    logger.debug(
        f"corr_test: {r.shape[0]} variables, method={method}, "
        f"na_deletion={na_deletion}, adjust={adjust}"
    )
    return CorrelationTest(
        r=r, p=p, n=n, method=method, na_deletion=na_deletion,
        adjust=adjust, labels=[str(c) for c in df.columns],
    )
