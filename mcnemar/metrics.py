import numpy as np

from .compute_power import power_approximations
from .errors import InvalidArgument
from .logging import get_logger, log
from .stats_tests import discordant_pair, stats_tests
from .types import ContingencyTable, TestResult
from .validation import DEFAULT_ALPHA, validate_alpha, validate_table

_logger = get_logger(__name__)


def compute_mcnemar(
    x,
    alpha: float = DEFAULT_ALPHA,
    *,
    test: str = "stats_test::mcnemar",
    power: str = "power::normal_approximation",
) -> TestResult:
    """
    McNemar's chi-square test for matched pairs on a 2x2 table.

    The table is laid out as:

                        condition 2
                        +       -
        condition 1 +   a       b
                    -   c       d

    and the test only depends on the discordant cells b and c.

    Args:
        x: 2x2 table of non-negative integer counts (nested lists, numpy array,
           pandas DataFrame or `ContingencyTable`).
        alpha (float): significance level in (0, 1). Defaults to 0.05.
        test (str): name of the registered statistical test.
        power (str): name of the registered power approximation.

    Returns:
        TestResult: statistic, critical value, p-value, power and the advisories
                    raised for degenerate tables.

    Raises:
        InvalidArgument: if `x` or `alpha` are not valid.
    """
    table = validate_table(x)
    alpha = validate_alpha(alpha)

    contingency = ContingencyTable(
        a=int(table[0, 0]),
        b=int(table[0, 1]),
        c=int(table[1, 0]),
        d=int(table[1, 1]),
    )
    discordant = discordant_pair(table)
    # python ints, the int64 sum of four large counts can overflow
    n = contingency.n

    test_output = stats_tests.get(test)(table=table, alpha=alpha)
    power_output = power_approximations.get(power)(
        discordant=discordant, n=n, alpha=alpha
    )

    diagnostics = test_output.diagnostics + power_output.diagnostics
    for diagnostic in diagnostics:
        log(
            _logger.warning,
            f"{diagnostic.code.value}: {diagnostic.message}",
            "yellow",
        )

    return TestResult(
        chisq=test_output.chisq,
        df=test_output.df,
        crit=test_output.crit,
        pvalue=test_output.pvalue,
        alpha=alpha,
        z_beta=power_output.z_beta,
        power=power_output.power,
        n=n,
        table=contingency,
        discordant=discordant,
        diagnostics=diagnostics,
    )


def _as_binary_vector(outcomes, argument: str) -> np.ndarray:
    values = np.asarray(outcomes)
    if values.ndim != 1:
        raise InvalidArgument(
            f"{argument} must be a 1-D sequence of outcomes, got shape {values.shape}.",
            argument=argument,
            constraint="shape",
        )
    if values.dtype.kind not in ("b", "i", "u", "f"):
        raise InvalidArgument(
            f"{argument} must hold 0/1 or boolean outcomes, got dtype {values.dtype}.",
            argument=argument,
            constraint="type",
        )
    if not np.all((values == 0) | (values == 1)):
        raise InvalidArgument(
            f"{argument} must only contain 0/1 or boolean outcomes.",
            argument=argument,
            constraint="range",
        )
    return values.astype(bool)


def make_table(outcomes_1, outcomes_2) -> ContingencyTable:
    """
    Builds the 2x2 table from two paired vectors of dichotomous outcomes.

    Args:
        outcomes_1 (list | np.ndarray): outcomes under condition 1 (1/True is positive).
        outcomes_2 (list | np.ndarray): outcomes under condition 2, paired element-wise
                                        with `outcomes_1`.

    Returns:
        ContingencyTable: a = both positive, b = positive under condition 1 only,
                          c = positive under condition 2 only, d = both negative.
    """
    pos_1 = _as_binary_vector(outcomes_1, "outcomes_1")
    pos_2 = _as_binary_vector(outcomes_2, "outcomes_2")
    if len(pos_1) != len(pos_2):
        raise InvalidArgument(
            f"Paired outcomes must have the same length, got {len(pos_1)} and {len(pos_2)}.",
            argument="outcomes_2",
            constraint="shape",
        )

    return ContingencyTable(
        a=int((pos_1 & pos_2).sum()),
        b=int((pos_1 & ~pos_2).sum()),
        c=int((~pos_1 & pos_2).sum()),
        d=int((~pos_1 & ~pos_2).sum()),
    )


def compute_mcnemar_from_outcomes(
    outcomes_1, outcomes_2, alpha: float = DEFAULT_ALPHA
) -> TestResult:
    """
    Wrapper to run McNemar's test on paired outcomes, e.g. the per-item
    correctness of two classifiers evaluated on the same references.
    """
    return compute_mcnemar(make_table(outcomes_1, outcomes_2), alpha=alpha)
