import math

from .metrics import compute_mcnemar
from .types import TestResult
from .validation import DEFAULT_ALPHA


def _fmt(value: float, spec: str) -> str:
    # nan and inf are printed the way MATLAB's fprintf prints them
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Inf" if value > 0 else "-Inf"
    return format(value, spec)


def format_report(result: TestResult) -> str:
    """
    Three-line summary of a McNemar test:

        Critical value at 95% significance level = 3.8415
        McNemar chi-square (with Yates' correction) = 20.672222    p = 0.000005
        alpha = 0.0500  Zb = 2.7566  Power (2-tails) = 0.0058
    """
    return "\n".join(
        [
            f"Critical value at {_fmt((1 - result.alpha) * 100, '.0f')}% "
            f"significance level = {_fmt(result.crit, '.4f')}",
            f"McNemar chi-square (with Yates' correction) = {_fmt(result.chisq, '.6f')}"
            f"    p = {_fmt(result.pvalue, '.6f')}",
            f"alpha = {_fmt(result.alpha, '.4f')}  Zb = {_fmt(result.z_beta, '.4f')}"
            f"  Power (2-tails) = {_fmt(result.power, '.4f')}",
        ]
    )


def print_report(x, alpha: float = DEFAULT_ALPHA) -> TestResult:
    """Runs the test on `x`, prints the summary to stdout and returns the result."""
    result = compute_mcnemar(x, alpha=alpha)
    print(format_report(result))
    return result
