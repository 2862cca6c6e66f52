from .errors import Advisory, InvalidArgument, McNemarError
from .estimator import McNemarEstimator
from .metrics import compute_mcnemar, compute_mcnemar_from_outcomes, make_table
from .report import format_report, print_report
from .types import ContingencyTable, Diagnostic, DiscordantPair, TestResult

__all__ = [
    "compute_mcnemar",
    "compute_mcnemar_from_outcomes",
    "make_table",
    "format_report",
    "print_report",
    "McNemarEstimator",
    "ContingencyTable",
    "DiscordantPair",
    "Diagnostic",
    "TestResult",
    "Advisory",
    "InvalidArgument",
    "McNemarError",
]
