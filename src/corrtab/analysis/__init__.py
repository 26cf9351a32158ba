"""
``corrtab.analysis`` — statistics behind correlation tables.

Quick-start
-----------
>>> from corrtab.analysis import corr_test
>>> res = corr_test(df, method="kendall", na_deletion="complete")
>>> res.r, res.p
"""

from .correlation import CorrelationTest, corr_test

__all__ = [
    "CorrelationTest",
    "corr_test",
]
