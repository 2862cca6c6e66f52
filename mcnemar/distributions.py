"""
Special functions used by the test and the power approximation.

Thin wrappers over scipy that always return python floats, so results
compare bit-for-bit across calls.
"""

import math

from scipy import special
from scipy.stats import chi2


def chi2_quantile(p: float, df: int = 1) -> float:
    """Inverse CDF of the chi-square distribution: x such that P(X <= x) = p."""
    return float(chi2.ppf(p, df))


def chi2_cdf(x: float, df: int = 1) -> float:
    """P(X <= x) for a chi-square distribution with `df` degrees of freedom."""
    if math.isnan(x):
        return math.nan
    return float(chi2.cdf(x, df))


def erfc(x: float) -> float:
    return float(special.erfc(x))


def erfcinv(y: float) -> float:
    return float(special.erfcinv(y))
