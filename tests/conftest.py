from __future__ import annotations

import re

import numpy as np
import pandas as pd
import pytest

_ROW = re.compile(r"<tr>(.*?)</tr>", re.S)
_CELL = re.compile(r"<(t[hd])([^>]*)>(.*?)</t[hd]>", re.S)


def split_rows(markup: str) -> list:
    """Rows of a rendered table as lists of ``(element, attrs, content)``."""
    return [_CELL.findall(row) for row in _ROW.findall(markup)]


@pytest.fixture
def rows_of():
    return split_rows


@pytest.fixture
def matrix4() -> np.ndarray:
    """Symmetric 4×4 correlation matrix."""
    return np.array([
        [1.00, 0.25, -0.50, 0.10],
        [0.25, 1.00, 0.75, -0.05],
        [-0.50, 0.75, 1.00, 0.32],
        [0.10, -0.05, 0.32, 1.00],
    ])


@pytest.fixture
def observations() -> pd.DataFrame:
    """60 rows, four numeric variables; alpha and beta strongly correlated."""
    rng = np.random.default_rng(2025)
    T = 60
    a = rng.normal(size=T)
    b = 0.8 * a + 0.3 * rng.normal(size=T)
    c = rng.normal(size=T)
    d = -0.5 * a + rng.normal(size=T)
    return pd.DataFrame({"alpha": a, "beta": b, "gamma": c, "delta": d})
