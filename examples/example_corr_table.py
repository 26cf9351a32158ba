"""
===============================================================================
corrtab — Complete Walkthrough
===============================================================================

This example builds a small questionnaire-like dataset:

    six items  →  two latent factors  →  observed answers (with gaps)

and renders its correlations the ways a researcher typically would: the
default table, a lower-triangle table with numeric p-values and small
values hidden, and a restyled inline table for a notebook.

Run:
    python example_corr_table.py
"""

from pathlib import Path

import numpy as np
import pandas as pd

from corrtab import corr_test, tab_corr
from corrtab.utils import setup_file_logging

OUT_DIR = Path("corrtab_example")
setup_file_logging(OUT_DIR)

rng = np.random.default_rng(2025)
T = 200

f1 = rng.normal(size=T)
f2 = rng.normal(size=T)
df = pd.DataFrame({
    "I cope well": 0.8 * f1 + 0.4 * rng.normal(size=T),
    "I feel supported": 0.7 * f1 + 0.5 * rng.normal(size=T),
    "Caring is worthwhile": 0.6 * f1 + 0.6 * rng.normal(size=T),
    "Caring is a burden": 0.8 * f2 + 0.4 * rng.normal(size=T),
    "I feel trapped": 0.7 * f2 + 0.5 * rng.normal(size=T),
    "Unrelated item": rng.normal(size=T),
})
# a few missing answers
df.iloc[rng.choice(T, 15, replace=False), 2] = np.nan

# ── 1. Default table ──────────────────────────────────────────────────
out = tab_corr(df, title="Caregiver items")
print(out.metadata)

# ── 2. Lower triangle, numeric p, hide |r| < .3 ──────────────────────
out = tab_corr(df, triangle="lower", p_numeric=True, val_rm=0.3,
               string_diag=["1"] * df.shape[1])

# ── 3. Statistics first, then render ──────────────────────────────────
res = corr_test(df, method="spearman", na_deletion="complete", adjust="BH")
print(res.to_dataframe().to_string(index=False))
out = tab_corr(res, css={"valueremove": "color:blue;", "table": "+margin:1em;"},
               val_rm=0.3, strip_value_zero=True, strip_p_zero=True)

# ── 4. Inline table for a notebook / documentation page ───────────────
print(out.inline_document)
